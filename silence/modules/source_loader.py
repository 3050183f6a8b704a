from __future__ import annotations
from pathlib import Path

from silence import Expression
from silence.config import get_search_roots, get_prelude_root
from silence.errors import SilenceImportError
from silence.evaluation.evaluator import evaluate_all
from silence.log import get_logger
from silence.reader.parser import parse_all
from silence.types.environment import EnvironmentStack

logger = get_logger(__name__)

PRELUDE_FILE = 'core.sil'


# Map an import path to a file: absolute paths as-is, relative paths against
# the current directory and then each SILENCE_PATH root

def resolve_source(path: str) -> Path:
    p = Path(path)
    candidates = [p] if p.is_absolute() else [root / p for root in get_search_roots()]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise SilenceImportError(f"Cannot find source file '{path}' in SILENCE_PATH")


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except OSError as e:
        raise SilenceImportError(f"Cannot read source file '{path}': {e}") from e


def load_source(path: str, stack: EnvironmentStack) -> Expression:
    """Evaluate every expression in the file, in order, in the given stack."""
    resolved = resolve_source(path)
    logger.debug("Importing %s", resolved)
    return evaluate_all(parse_all(read_source(resolved)), stack)


def load_prelude(stack: EnvironmentStack) -> None:
    core = get_prelude_root() / PRELUDE_FILE
    if not core.exists():
        raise FileNotFoundError(f"Prelude not found at {core}")
    logger.debug("Loading prelude from %s", core)
    evaluate_all(parse_all(read_source(core)), stack)
