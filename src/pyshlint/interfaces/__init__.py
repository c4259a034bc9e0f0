# SPDX-License-Identifier: MIT
"""Interface modules aggregating protocols for pyshlint subsystems.

Import the specific interface modules (e.g. ``pyshlint.interfaces.logger``)
directly instead of relying on re-exports.
"""

__all__: tuple[str, ...] = ()
