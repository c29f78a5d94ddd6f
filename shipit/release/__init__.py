"""Release domain: data model, error taxonomy and the pure parsing/retention rules.

Nothing in this package runs a process; ``shipit.services`` does that.
"""

from __future__ import annotations
