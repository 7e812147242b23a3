"""Luna Linux Builder.

Sequential, fail-fast ISO build orchestrator:
- One immutable build configuration passed to every step
- Ten ordered steps, halting on the first failure
- External tools (mmdebstrap, mksquashfs, xorriso, chroot) invoked as typed commands
- Centralized logging
"""

__all__ = []
