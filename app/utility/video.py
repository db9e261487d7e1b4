"""
Video probing utilities using FFmpeg
"""
import logging
import os
import shutil
import subprocess
from typing import Optional

logger = logging.getLogger("uvicorn")


def check_ffprobe_installed() -> bool:
    """
    Check if ffprobe (shipped with FFmpeg) is available in PATH

    Returns:
        bool: True if ffprobe can be executed, False otherwise
    """
    return shutil.which("ffprobe") is not None


def get_video_duration(video_path: str) -> Optional[float]:
    """
    Get the duration of a video file in seconds

    Args:
        video_path: Path to the video file

    Returns:
        Optional[float]: Duration in seconds, or None when it cannot be probed
    """
    if not check_ffprobe_installed():
        logger.warning("ffprobe is not installed, video duration will be stored as 0")
        return None

    if not os.path.exists(video_path):
        return None

    try:
        command = [
            "ffprobe",
            "-v", "error",
            "-show_entries", "format=duration",
            "-of", "default=noprint_wrappers=1:nokey=1",
            video_path
        ]

        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=True
        )

        return round(float(result.stdout.decode().strip()), 3)

    except (subprocess.CalledProcessError, ValueError) as e:
        logger.warning(f"Could not read video duration of {video_path}: {e}")
        return None
