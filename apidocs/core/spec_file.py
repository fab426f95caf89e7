"""
Inspection helpers for the OpenAPI file served at /api-docs.

The file is owned by an external authoring step; this module never writes
it. Problems are collected as short strings (``kind:path``) instead of being
raised, so readiness can report all of them at once.
"""
from __future__ import annotations

import logging
import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

_log = logging.getLogger("apidocs.spec")

FALLBACK_MEDIA_TYPE = "application/octet-stream"

# Older interpreters ship no entry for YAML.
mimetypes.add_type("application/yaml", ".yaml")
mimetypes.add_type("application/yaml", ".yml")


def media_type_for(path: Path) -> str:
    media_type, _ = mimetypes.guess_type(str(path))
    return media_type or FALLBACK_MEDIA_TYPE


def is_servable(path: Path) -> bool:
    return path.is_file()


@dataclass
class SpecFileStatus:
    path: Path
    problems: List[str] = field(default_factory=list)
    spec_version: Optional[str] = None
    title: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.problems

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": str(self.path),
            "spec_version": self.spec_version,
            "title": self.title,
        }


def inspect_spec_file(path: Path) -> SpecFileStatus:
    """
    Read and parse the spec file, recording what is wrong with it.

    Checks, in order: the file exists, it can be read, it is valid YAML, the
    document is a mapping, and it declares ``openapi`` or ``swagger``.
    """
    status = SpecFileStatus(path=path)

    if not is_servable(path):
        status.problems.append(f"missing_file:{path}")
        return status

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        status.problems.append(f"unreadable_file:{path} err={type(e).__name__}")
        return status

    try:
        doc = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        _log.warning("Spec file %s is not valid YAML: %s", path, e)
        status.problems.append(f"invalid_yaml:{path}")
        return status

    if not isinstance(doc, dict):
        status.problems.append(f"not_a_mapping:{path}")
        return status

    version = doc.get("openapi") or doc.get("swagger")
    if version is None:
        status.problems.append(f"not_openapi:{path}")
        return status

    status.spec_version = str(version)
    info = doc.get("info")
    if isinstance(info, dict) and info.get("title") is not None:
        status.title = str(info["title"])
    return status
