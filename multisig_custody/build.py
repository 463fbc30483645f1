import subprocess
import sys
from pathlib import Path
from typing import Union

import fire

from multisig_custody.onchain.wallet import wallet


def build_contract(
    type: str, script: Union[Path, str], cli_options=("--cf",), args=()
):
    script = Path(script)
    command = [
        sys.executable,
        "-m",
        "opshin",
        *cli_options,
        "build",
        type,
        script,
        *args,
        "--recursion-limit",
        "2000",
        "-O2",
    ]
    subprocess.run(command, check=True)
    return Path(f"build/{script.stem}/script.cbor")


def main():
    built_contract = build_contract("spending", wallet.__file__)
    print(f"Built wallet contract to {built_contract}")


if __name__ == "__main__":
    fire.Fire(main)
