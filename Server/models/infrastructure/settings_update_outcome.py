"""
CaptureDesk Server - Settings Update Outcome Model

Dataclass describing what happened to one settings form submission.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SettingsUpdateOutcome:
    """
    Result of running the settings update pipeline for a single request

    sections_applied lists the sections that completed, in execution order.
    failed_section / message are set when a section rejected its input.
    killswitch_message is set when the killswitch section disabled the system.
    """
    sections_applied: List[str] = field(default_factory=list)
    failed_section: Optional[str] = None
    message: Optional[str] = None
    killswitch_message: Optional[str] = None

    @property
    def Succeeded(self) -> bool:
        return self.failed_section is None

    @property
    def Killed(self) -> bool:
        return self.killswitch_message is not None
