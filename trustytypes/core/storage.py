import json
from pathlib import Path

import structlog
from pydantic import ValidationError

from trustytypes.models.dependency import Dependency

logger = structlog.get_logger('storage')


def load_dependencies(filepath: str | Path) -> list[Dependency]:
    """
    Load a dependency snapshot from disk.

    Accepts either a JSON array of dependency objects or JSONL with one
    object per line. Invalid JSONL lines are logged and skipped. A missing
    file is an empty snapshot.
    """
    path = Path(filepath)
    if not path.exists():
        logger.warning('Dependency file not found', path=str(path))
        return []

    text = path.read_text(encoding='utf-8')
    if text.lstrip().startswith('['):
        # A broken array is a broken snapshot, let the error through
        return [Dependency.model_validate(item) for item in json.loads(text)]

    records = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(Dependency.model_validate_json(line))
        except ValidationError as e:
            logger.warning(
                'Skipping invalid dependency record',
                path=str(path), line=lineno, error=str(e),
            )
    logger.debug('Loaded dependencies', path=str(path), count=len(records))
    return records
