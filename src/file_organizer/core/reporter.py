"""Render run outcomes into the JSON document written to stdout."""

import json
from typing import Any, Dict

from .organizer import OrganizeOutcome
from .populator import PopulateOutcome


class Reporter:
    """Turn outcomes into the ``operations`` / ``result`` / ``error`` payload."""

    @staticmethod
    def organize_payload(outcome: OrganizeOutcome) -> Dict[str, Any]:
        if not outcome.opened:
            # Nothing was touched; the caller only needs the reason.
            return {'operations': [], 'result': None, 'error': outcome.error}

        payload: Dict[str, Any] = {
            'operations': outcome.log.to_list(),
            'result': {
                category.value: list(names)
                for category, names in outcome.categories.items()
            },
        }
        if outcome.error is not None:
            payload['error'] = outcome.error
        return payload

    @staticmethod
    def populate_payload(outcome: PopulateOutcome) -> Dict[str, Any]:
        if outcome.error is not None:
            return {'operations': outcome.log.to_list(), 'result': None, 'error': outcome.error}

        return {
            'operations': outcome.log.to_list(),
            'result': {'dirPath': str(outcome.dir_path), 'created': outcome.created},
        }

    @staticmethod
    def error_payload(message: str) -> Dict[str, Any]:
        return {'operations': [], 'result': None, 'error': message}

    @staticmethod
    def to_json(payload: Dict[str, Any]) -> str:
        """Compact single-line JSON; non-ASCII text is kept as is."""
        return json.dumps(payload, ensure_ascii=False, separators=(',', ':'))

    @staticmethod
    def to_bytes(payload: Dict[str, Any]) -> bytes:
        """UTF-8 document plus newline.

        Filenames that are not valid UTF-8 reach Python as surrogate escapes;
        they are written back as their original bytes.
        """
        return (Reporter.to_json(payload) + "\n").encode('utf-8', 'surrogateescape')
