"""Release resolution.

Layout:
- semver / branches / tags / latest: pure version rules
- model / errors / outputs: data passed across layers
- ports: interfaces for the CI runner and the repository host
- resolver: orchestration
"""

from __future__ import annotations
