"""TagService — describe the tag families and the option keys they bind."""

from __future__ import annotations

from sflang.domain.tags import TAGS
from sflang.services.base import BaseService
from sflang.services.result import ServiceResult


class TagService(BaseService):
    def list_tags(self) -> ServiceResult:
        """One item per tag name, sorted, with the element and option keys."""
        items = []
        for tag in sorted(TAGS):
            family = TAGS[tag]
            bindings = family.bindings()
            items.append(
                {
                    "tag": tag,
                    "element": family.element,
                    "data": family.data_role,
                    "options": sorted(bindings),
                    "targets": {
                        key: list(entry.targets) for key, entry in sorted(bindings.items())
                    },
                }
            )
        limits = self._limits
        return ServiceResult(
            ok=True,
            op="tags",
            data={
                "items": items,
                "container": {"start": limits.start_tag, "end": limits.end_tag},
            },
        )
