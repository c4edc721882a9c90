"""References to the stdlib json functions, captured before any patching.

`jsonmark.install` may replace `json.dumps`/`json.loads`; the codec always
goes through these originals so it never calls itself.
"""

import json
from types import SimpleNamespace

original_json = SimpleNamespace(dumps=json.dumps, loads=json.loads)

__all__ = ["original_json"]
