from __future__ import annotations

import os
from typing import Dict, Any

# Default logging level
level = os.getenv('LOG_LEVEL', 'warning')

# Default logging channel
default = os.getenv('LOG_CHANNEL', 'stderr')

channels: Dict[str, Dict[str, Any]] = {
    'stderr': {
        'driver': 'stderr',
        'level': level,
    },

    'stdout': {
        'driver': 'stdout',
        'level': level,
    },

    'null': {
        'driver': 'null',
    },
}

# Record layout shared by every stream channel
format = os.getenv('LOG_FORMAT', '[%(asctime)s] %(levelname)s in %(name)s: %(message)s')
date_format = os.getenv('LOG_DATE_FORMAT', '%Y-%m-%d %H:%M:%S')
