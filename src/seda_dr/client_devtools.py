"""Data request client backed by the @seda-protocol/dev-tools Node.js library."""

import json
import logging
import subprocess
from typing import Any, Dict, List, Optional

from seda_dr.auth.signer import Signer
from seda_dr.client import DataRequestClient, DataRequestError
from seda_dr.config import get_dev_tools_dir, get_node_binary
from seda_dr.core.types import DataRequestResult, PostDataRequestInput

logger = logging.getLogger(__name__)

# Reads {signingConfig, input, options} from stdin, writes the result JSON to stdout
BRIDGE_SCRIPT = """
import { Signer, buildSigningConfig, postAndAwaitDataRequest } from '@seda-protocol/dev-tools';

const chunks = [];
for await (const chunk of process.stdin) chunks.push(chunk);
const request = JSON.parse(Buffer.concat(chunks).toString('utf-8'));

const signer = await Signer.fromPartial(buildSigningConfig(request.signingConfig));
const input = {
    ...request.input,
    execInputs: Buffer.from(request.input.execInputs, 'hex'),
    tallyInputs: Buffer.from(request.input.tallyInputs, 'hex'),
    memo: Buffer.from(request.input.memo, 'hex'),
};
if (input.gasPrice !== undefined) input.gasPrice = BigInt(input.gasPrice);

const result = await postAndAwaitDataRequest(signer, input, request.options ?? {});
process.stdout.write(JSON.stringify(result, (key, value) =>
    typeof value === 'bigint' ? value.toString() : value));
"""


class DevToolsClient(DataRequestClient):
    """
    Posts data requests through @seda-protocol/dev-tools.

    Each submission runs the library in a Node.js child process. The request,
    including the mnemonic, is written to the child's stdin and never appears
    on its command line. The call blocks until the library reports a final
    result or fails.
    """

    def __init__(self, node_binary: Optional[str] = None, working_dir: Optional[str] = None):
        """
        Initialize the client.

        Args:
            node_binary: Node.js executable (defaults to SEDA_NODE_BINARY or "node")
            working_dir: Directory whose node_modules holds the library
                (defaults to SEDA_DEV_TOOLS_DIR or the current directory)
        """
        self.node_binary = node_binary or get_node_binary()
        self.working_dir = working_dir or get_dev_tools_dir()

    def _build_command(self) -> List[str]:
        return [self.node_binary, "--input-type=module", "-e", BRIDGE_SCRIPT]

    def _build_payload(
        self,
        signer: Signer,
        dr_input: PostDataRequestInput,
        options: Optional[Dict[str, Any]],
    ) -> str:
        return json.dumps({
            "signingConfig": signer.config.to_dict(),
            "input": dr_input.to_dict(),
            "options": options or {},
        })

    def post_and_await_data_request(
        self,
        signer: Signer,
        dr_input: PostDataRequestInput,
        options: Optional[Dict[str, Any]] = None,
    ) -> DataRequestResult:
        logger.debug(
            "Posting data request for program %s via %s",
            dr_input.exec_program_id,
            signer.get_endpoint(),
        )

        completed = subprocess.run(
            self._build_command(),
            input=self._build_payload(signer, dr_input, options),
            capture_output=True,
            text=True,
            cwd=self.working_dir,
        )

        if completed.returncode != 0:
            message = completed.stderr.strip() or f"exit status {completed.returncode}"
            raise DataRequestError(f"Data request failed: {message}")

        try:
            data = json.loads(completed.stdout)
        except json.JSONDecodeError as e:
            raise DataRequestError(f"Could not parse data request result: {e}") from e

        result = DataRequestResult.from_dict(data)
        logger.debug("Data request %s resolved at height %d", result.dr_id, result.block_height)
        return result
