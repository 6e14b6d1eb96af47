"""Module declaration file parsing.

The declaration file is plain UTF-8 text. The first line whose stripped
text starts with ``module `` declares the module identity, e.g.::

    module "example.com/project.git"

yields ``example.com/project``.
"""

from __future__ import annotations

from pathlib import Path

from modroot.errors import ModuleIdentityNotFound
from modroot.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_DECLARATION_FILE = "go.mod"

MODULE_PREFIX = "module "
QUOTE_CHARS = ('"', "`")
VCS_SUFFIX = ".git"


def _clean_identity(raw: str) -> str:
    identity = raw.strip()
    # One matching pair of surrounding quotes only
    if len(identity) >= 2 and identity[0] in QUOTE_CHARS and identity[-1] == identity[0]:
        identity = identity[1:-1]
    if identity.endswith(VCS_SUFFIX):
        identity = identity[: -len(VCS_SUFFIX)]
    return identity


def parse_module_identity(text: str, source: Path | str | None = None) -> str:
    """Extract the module identity from declaration file text.

    Parameters
    ----------
    text : str
        Full declaration file contents.
    source : Path or str, optional
        Where the text came from; only used in the error message.

    Returns
    -------
    str
        Identity with surrounding quotes and a trailing ``.git`` removed.

    Raises
    ------
    ModuleIdentityNotFound
        If no line starts with ``module ``.
    """
    for line in text.split("\n"):
        line = line.strip()
        if line.startswith(MODULE_PREFIX):
            return _clean_identity(line[len(MODULE_PREFIX):])
    raise ModuleIdentityNotFound(source)


def read_module_identity(
    root: Path | str,
    declaration_file: str = DEFAULT_DECLARATION_FILE,
) -> str:
    """Read ``<root>/<declaration_file>`` and return its module identity.

    I/O errors from reading the file propagate unchanged. Bytes that are
    not valid UTF-8 (e.g. a Latin-1 comment) decode to U+FFFD instead of
    failing the whole file.
    """
    path = Path(root) / declaration_file
    text = path.read_bytes().decode("utf-8", errors="replace")
    identity = parse_module_identity(text, source=path)
    log.debug("module_identity_read", path=str(path), identity=identity)
    return identity
