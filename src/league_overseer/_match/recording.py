# Area: Officiating
"""
league_overseer._match.recording — Demo recording of matches
=============================================================

Starts the host's recording buffer when a timed game begins and saves
it under a descriptive name when the game ends:

    Official-YYYYMMDD-<team one>-vs-<team two>-HHMM[-Canceled].rec
    Fun_Match-YYYYMMDD-HHMM.rec
"""

import logging
from datetime import datetime
from typing import Optional

from .context import OverseerContext
from .enums import MatchKind
from .snapshot import MatchSnapshot
from ..host import ALL_PLAYERS

logger = logging.getLogger("league_overseer.recording")


def recording_filename(snapshot: Optional[MatchSnapshot], match_time: datetime) -> str:
    if snapshot is not None and snapshot.kind == MatchKind.OFFICIAL:
        suffix = "-Canceled" if snapshot.canceled else ""
        return (
            f"Official-{match_time:%Y%m%d}-{snapshot.team_one_name}-vs-"
            f"{snapshot.team_two_name}-{match_time:%H%M}{suffix}.rec"
        )
    return f"Fun_Match-{match_time:%Y%m%d}-{match_time:%H%M}.rec"


class MatchRecorder:
    def __init__(self, context: OverseerContext):
        self.context = context
        self.recording = False

    def on_game_start(self) -> bool:
        if not self.context.config.record_matches:
            return False
        self.recording = self.context.host.start_recording()
        if not self.recording:
            logger.warning("Host refused to start the recording buffer")
        return self.recording

    def on_game_end(self, snapshot: Optional[MatchSnapshot], match_time: datetime) -> Optional[str]:
        """Save and stop the recording; returns the file name, or None if nothing was recorded."""
        if not self.recording:
            return None

        filename = recording_filename(snapshot, match_time)
        host = self.context.host
        host.save_recording(filename)
        host.stop_recording()
        self.recording = False

        host.send_message(ALL_PLAYERS, f"Match saved as: {filename}")
        logger.info("Match saved as: %s", filename)
        return filename
