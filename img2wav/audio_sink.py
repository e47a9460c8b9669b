# audio_sink.py
"""Write PCM16 mono samples to a WAV file."""

from __future__ import annotations

import contextlib
import logging
import os
import sys
import wave
from array import array
from pathlib import Path

from img2wav.errors import SinkError

log = logging.getLogger(__name__)


def write_wav(path, samples, sample_rate: int, channels: int = 1, bit_depth: int = 16) -> Path:
    """
    Write `samples` (signed 16-bit ints) as a mono 16-bit PCM WAV.

    The file is written next to its target and moved into place when
    complete, so a failed write never leaves a half-written WAV behind.
    """
    if channels != 1 or bit_depth != 16:
        raise ValueError("only mono 16-bit PCM output is supported")
    if sample_rate <= 0:
        raise ValueError("sample_rate must be positive")

    p = Path(path)
    pcm = array("h", samples)
    if sys.byteorder == "big":
        pcm.byteswap()   # WAV is little-endian

    tmp = p.with_name(p.name + ".part")
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with wave.open(str(tmp), "wb") as w:
            w.setnchannels(channels)
            w.setsampwidth(bit_depth // 8)
            w.setframerate(sample_rate)
            w.writeframes(pcm.tobytes())
        os.replace(tmp, p)
    except (OSError, wave.Error) as e:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise SinkError(f"Failed to write WAV: {p}") from e

    log.info("wrote %d samples @ %d Hz to %s", len(pcm), sample_rate, p)
    return p
