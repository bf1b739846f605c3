"""Extract conversation-level metadata from raw export entries."""

import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)


def extract_conversation_metadata(data: Dict[str, Any]) -> Dict[str, Any]:
    """Extract the identity fields carried onto the cleaned conversation."""
    return {
        'id': data.get('id'),
        'title': data.get('title'),
        'create_time': data.get('create_time'),
    }
