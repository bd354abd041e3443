"""Job status persistence for the processing backend."""

from video_translator.core.video_processing.database.job_status_updater import JobStatusUpdater

__all__ = ["JobStatusUpdater"]
