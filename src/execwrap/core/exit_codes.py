from __future__ import annotations

OK = 0
ERR_USAGE = 2
ERR_VALIDATION = 3
ERR_LAUNCH = 126
ERR_NOT_FOUND = 127
ERR_INTERNAL = 99
