"""
Quantization label extraction for GGUF model repositories.

Quantization identifiers show up in at least three conventions on the Hub:

- plain filename suffix:     model-Q4_K_M.gguf, model.BF16.gguf
- split-archive suffix:      model-Q4_K_M-00001-of-00005.gguf
- quant-named subdirectory:  BF16/model-BF16-00001-of-00005.gguf

QuantExtractor recovers the distinct labels from a repository file listing.
The directory check runs first, then an ordered table of filename patterns
with first-match-wins.

Example:
    >>> extract_quants(["readme.md", "model-Q4_K_M.gguf", "model-Q8_0.gguf"])
    ['Q4_K_M', 'Q8_0']
"""

import re
from typing import Dict, Iterable, List, Optional, Pattern

from .models import Sibling


GGUF_EXTENSION = ".gguf"


class QuantExtractor:
    """
    Extracts quantization labels from GGUF filenames.

    All state is per call; the class only holds the compiled pattern tables.
    """

    # ================================================================
    # Filename Patterns (order matters: first match wins)
    # ================================================================
    QUANT_PATTERNS: List[Pattern[str]] = [
        # Standard quants: model-Q4_K_M.gguf or model.Q4_K_M.gguf
        re.compile(r"[._-](Q[0-9]+_[A-Z0-9_]+)\.gguf", re.IGNORECASE),
        re.compile(r"[._-](IQ[0-9]+_[A-Z0-9_]+)\.gguf", re.IGNORECASE),
        re.compile(r"[._-](F16|F32|BF16)\.gguf", re.IGNORECASE),
        # Unsloth style: model-UD-TQ1_0.gguf
        re.compile(r"[._-]((?:UD-)?TQ[0-9]+_[0-9]+)\.gguf", re.IGNORECASE),
        # Split files: model-Q4_K_M-00001-of-00005.gguf
        re.compile(r"[._-](Q[0-9]+_[A-Z0-9_]+)-[0-9]+-of-[0-9]+\.gguf", re.IGNORECASE),
        re.compile(r"[._-](IQ[0-9]+_[A-Z0-9_]+)-[0-9]+-of-[0-9]+\.gguf", re.IGNORECASE),
        re.compile(r"[._-](F16|F32|BF16)-[0-9]+-of-[0-9]+\.gguf", re.IGNORECASE),
    ]

    # Quant-named directory: BF16/model-BF16-00001-of-00005.gguf
    RE_QUANT_DIR = re.compile(r"^([A-Z0-9_]+)/", re.IGNORECASE)

    QUANT_DIR_PREFIXES = ("Q", "IQ", "F16", "F32", "BF16", "TQ")

    # ================================================================
    # Precision Scores (higher = more precision)
    # ================================================================
    QUANT_LEVELS: Dict[str, int] = {
        # Ternary / ultra-low precision
        "IQ1": 10, "TQ1": 12, "IQ2": 15, "TQ2": 18,
        # Low precision
        "Q2": 20, "Q3": 30, "IQ3": 30,
        # Medium precision
        "Q4": 40, "IQ4": 40, "Q5": 50, "Q6": 60,
        # High precision
        "Q8": 80,
        # Full precision
        "F16": 160, "BF16": 160, "F32": 320,
    }

    RE_QUANT_FAMILY = re.compile(r"^(?:UD-)?((?:IQ|TQ|Q)[0-9]+|BF16|F16|F32)", re.IGNORECASE)

    # ================================================================
    # Extraction
    # ================================================================
    @classmethod
    def is_gguf(cls, filename: str) -> bool:
        """Check whether a filename has the GGUF extension (case-insensitive)."""
        return filename.lower().endswith(GGUF_EXTENSION)

    @classmethod
    def is_quant_name(cls, name: str) -> bool:
        """
        Check if a string looks like a quantization name.

        Args:
            name: Candidate name, usually a directory

        Returns:
            True if it starts with a known quant family prefix
        """
        upper = name.upper()
        return any(upper.startswith(prefix) for prefix in cls.QUANT_DIR_PREFIXES)

    @classmethod
    def quant_from_directory(cls, filename: str) -> Optional[str]:
        """
        Return the leading directory name if it looks like a quant.

        The name is returned as captured, without re-casing.
        """
        dir_match = cls.RE_QUANT_DIR.match(filename)
        if dir_match and cls.is_quant_name(dir_match.group(1)):
            return dir_match.group(1)
        return None

    @classmethod
    def quant_from_filename(cls, filename: str) -> Optional[str]:
        """Try the filename patterns in order and return the first label found."""
        for pattern in cls.QUANT_PATTERNS:
            match = pattern.search(filename)
            if match:
                return match.group(1).upper()
        return None

    @classmethod
    def extract(cls, filenames: Iterable[str]) -> List[str]:
        """
        Extract distinct quantization labels from a file listing.

        Non-GGUF files are skipped. Unrecognized GGUF files contribute
        nothing; this never raises.

        Args:
            filenames: Repository-relative filenames, in listing order

        Returns:
            Labels in first-seen order, without duplicates
        """
        seen = set()
        quants: List[str] = []

        for filename in filenames:
            if not cls.is_gguf(filename):
                continue

            quant = cls.quant_from_directory(filename)
            if quant is None:
                quant = cls.quant_from_filename(filename)

            if quant and quant not in seen:
                seen.add(quant)
                quants.append(quant)

        return quants

    # ================================================================
    # Precision Utilities
    # ================================================================
    @classmethod
    def get_quant_score(cls, quant: str) -> int:
        """
        Get the precision score for a quantization label.

        The Unsloth ``UD-`` prefix is ignored. Unknown labels score 0.

        Example:
            get_quant_score("Q4_K_M")    # 40
            get_quant_score("UD-TQ1_0")  # 12
        """
        match = cls.RE_QUANT_FAMILY.match(quant)
        if not match:
            return 0
        return cls.QUANT_LEVELS.get(match.group(1).upper(), 0)

    @classmethod
    def is_quant_above(cls, quant: str, threshold: str) -> bool:
        """Check if a quantization meets or exceeds a threshold."""
        return cls.get_quant_score(quant) >= cls.get_quant_score(threshold)

    @classmethod
    def filter_quants(cls, quants: Iterable[str], min_quant: Optional[str] = None) -> List[str]:
        """
        Keep labels at or above ``min_quant`` precision, preserving order.

        Args:
            quants: Labels to filter
            min_quant: Threshold label (e.g. "q4", "Q5_K_M"); None keeps all

        Returns:
            Filtered list of labels
        """
        if not min_quant:
            return list(quants)
        return [q for q in quants if cls.is_quant_above(q, min_quant)]


def extract_quants(filenames: Iterable[str]) -> List[str]:
    """Shortcut for QuantExtractor.extract()."""
    return QuantExtractor.extract(filenames)


def extract_quants_from_siblings(siblings: Iterable[Sibling]) -> List[str]:
    """
    Extract quantization labels from a model's sibling (file) records.

    Args:
        siblings: File entries from a model detail record

    Returns:
        Labels in first-seen order
    """
    return QuantExtractor.extract(s.rfilename for s in siblings)
