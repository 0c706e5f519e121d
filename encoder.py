import logging
import subprocess
from os import getenv
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_FFMPEG = getenv("FFMPEG", "ffmpeg")
CODEC = "pcm_s16le"


class Encoder:
    """
    Wraps the external ffmpeg binary that turns an audio file into a
    16-bit signed little-endian PCM WAV file.

    The encoder is treated as a black box: it gets an input path and an
    output path, and the only thing read back is its exit status. Its
    diagnostic stream is thrown away, so a failed conversion carries no
    detail beyond the failure itself.
    """

    def __init__(self, binary: Optional[str] = None):
        """
        Args:
            binary: Name or path of the ffmpeg executable. Defaults to the
                `FFMPEG` environment variable, or plain `ffmpeg` looked up
                on PATH.
        """
        self.binary = binary or DEFAULT_FFMPEG

    def command(self, input_path: str, output_path: str) -> List[str]:
        return [
            self.binary,
            "-i", input_path,
            "-acodec", CODEC,
            "-y",  # overwrite
            output_path,
        ]

    def encode(self, input_path: str, output_path: str) -> bool:
        """
        Runs ffmpeg for a single file and blocks until it exits.

        Returns True when ffmpeg exits with status 0, False otherwise. A
        binary that cannot be launched at all counts as a failed conversion.
        """
        cmd = self.command(input_path, output_path)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, stderr=subprocess.DEVNULL)
        except OSError as e:
            logger.warning("Could not launch %s: %s", self.binary, e)
            return False

        if result.returncode != 0:
            logger.debug("%s exited with status %d", self.binary, result.returncode)
        return result.returncode == 0
