import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ContractCheck:
    path: str
    content_length: Optional[int] = None
    read_error: Optional[str] = None
    missing: bool = False
    content: Optional[bytes] = dataclasses.field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.read_error is None


def check_contract_file(base_directory: Union[str, os.PathLike], filename: str) -> ContractCheck:
    """Read `filename` under `base_directory` once and report its size.

    I/O failures never escape: they come back as a ContractCheck with
    `read_error` set. On success the bytes read are kept on `content`, so
    callers never need to open the file again. `missing` separates the plain
    "file is not there" case from permission errors and other faults.
    """
    p = Path(base_directory) / filename
    try:
        content = p.read_bytes()
    except FileNotFoundError as e:
        logger.info(f"Contract file not found: {p}")
        return ContractCheck(path=str(p), read_error=str(e), missing=True)
    except OSError as e:
        logger.error(f"Failed to read contract file {p}: {e}")
        return ContractCheck(path=str(p), read_error=str(e))

    logger.debug(f"Read {len(content)} bytes from {p}")
    return ContractCheck(path=str(p), content_length=len(content), content=content)


def report_check(check: ContractCheck, out=None, err=None):
    out = out or sys.stdout
    err = err or sys.stderr
    if check.ok:
        print("\nContract file exists and is ready for deployment.", file=out)
        print(f"Contract size: {check.content_length} bytes", file=out)
    else:
        print(f"Error reading contract file: {check.read_error}", file=err)
