from pathlib import Path

import structlog
from pydantic import ValidationError

from trustytypes.core.config import get_config
from trustytypes.core.config import TrustyConfig
from trustytypes.models.report import Reply

logger = structlog.get_logger('report_service')


class ReportService:
    """Decodes, encodes and annotates package reports."""

    def __init__(self, config: TrustyConfig | None = None):
        self.config = config or get_config()

    def parse(self, payload: str | bytes) -> Reply:
        """Decode a report payload. Any malformed timestamp fails the whole decode."""
        try:
            reply = Reply.model_validate_json(payload)
        except ValidationError as e:
            logger.error(
                'Report decode failed',
                error_count=e.error_count(),
                fields=['.'.join(str(p) for p in err['loc']) for err in e.errors()],
            )
            raise
        logger.debug(
            'Report decoded',
            package=reply.package_name,
            package_type=reply.package_type,
            status=reply.status or None,
        )
        return reply

    def load(self, path: str | Path) -> Reply:
        """Decode a report saved to disk."""
        path = Path(path)
        logger.debug('Loading report', path=str(path))
        return self.parse(path.read_bytes())

    def dump(self, reply: Reply, indent: int | None = None) -> str:
        """Encode a report with its JSON keys and canonical timestamps."""
        return reply.model_dump_json(by_alias=True, indent=indent)

    def package_url(self, reply: Reply) -> str:
        return self.config.get_package_url(reply.package_type, reply.package_name)

    def fill_alternative_urls(self, reply: Reply) -> Reply:
        """Return a copy of the report whose alternatives carry their frontend URL."""
        packages = [
            alt.model_copy(
                update={
                    'package_name_url': self.config.get_package_url(
                        alt.package_type, alt.package_name,
                    ),
                },
            )
            for alt in reply.alternatives.packages
        ]
        alternatives = reply.alternatives.model_copy(
            update={'packages': packages},
        )
        return reply.model_copy(update={'alternatives': alternatives})
