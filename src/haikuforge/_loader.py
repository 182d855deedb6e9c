"""Lexicon storage: msgpack data file, manifest validation, SHA-256 checksums."""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from ._errors import (
    LexiconChecksumError,
    LexiconError,
    LexiconVersionError,
    PatternError,
)
from ._lexicon import Lexicon

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"
_SYLLABLES_FILE = "syllables.bin"
_MANIFEST_FILE = "manifest.json"


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / _MANIFEST_FILE
    if not manifest_path.exists():
        raise LexiconError(f"{_MANIFEST_FILE} not found in {data_dir}")
    try:
        with open(manifest_path) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise LexiconError(f"Malformed {_MANIFEST_FILE} in {data_dir}: {e}") from e


def _validate_manifest(manifest: dict[str, Any], data_dir: Path) -> None:
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise LexiconVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    filepath = data_dir / _SYLLABLES_FILE
    if not filepath.exists():
        raise LexiconError(f"Missing data file: {filepath}")
    expected = manifest.get("files", {}).get(_SYLLABLES_FILE)
    if expected is None:
        raise LexiconError(f"No checksum in manifest for {_SYLLABLES_FILE}")
    actual = _sha256(filepath)
    if actual != expected:
        raise LexiconChecksumError(
            f"Checksum mismatch for {_SYLLABLES_FILE}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )


def load_lexicon(data_dir: Path | str) -> Lexicon:
    """Validate and load a lexicon written by ``save_lexicon``."""
    data_dir = Path(data_dir)
    manifest = _read_manifest(data_dir)
    _validate_manifest(manifest, data_dir)

    with open(data_dir / _SYLLABLES_FILE, "rb") as f:
        try:
            raw = msgpack.unpackb(f.read(), raw=False, strict_map_key=False)
        except (ValueError, msgpack.UnpackException) as e:
            raise LexiconError(f"Corrupt {_SYLLABLES_FILE}: {e}") from e
    if not isinstance(raw, dict):
        raise LexiconError(f"{_SYLLABLES_FILE} must hold a word -> count map")

    try:
        lexicon = Lexicon(raw)
    except PatternError as e:
        raise LexiconError(f"Invalid entry in {_SYLLABLES_FILE}: {e}") from e
    logger.info("loaded lexicon of %d words from %s", len(lexicon), data_dir)
    return lexicon


def save_lexicon(lexicon: Lexicon, data_dir: Path | str) -> Path:
    """Write ``lexicon`` and its manifest into ``data_dir``; returns the directory."""
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)

    data_path = data_dir / _SYLLABLES_FILE
    with open(data_path, "wb") as f:
        f.write(msgpack.packb(dict(sorted(lexicon.items())), use_bin_type=True))

    manifest = {
        "version": _EXPECTED_VERSION,
        "files": {_SYLLABLES_FILE: _sha256(data_path)},
    }
    with open(data_dir / _MANIFEST_FILE, "w") as f:
        json.dump(manifest, f, indent=2)

    logger.debug("saved lexicon of %d words to %s", len(lexicon), data_dir)
    return data_dir
