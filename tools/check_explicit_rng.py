from __future__ import annotations

"""Fail-fast grep for hidden nondeterminism.

Schedule generation must be reproducible from a seed, so library code never
touches the module-level `random` generator or the host clock. Randomness is
always an injected `random.Random` instance.

Run:
  python -m tools.check_explicit_rng

Exit code:
  0 - clean
  1 - forbidden pattern found
"""

import os
import re
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

FORBIDDEN_PATTERNS = [
    # module-level random generator
    r"\brandom\.(random|shuffle|choice|choices|randint|randrange|sample|uniform|seed)\s*\(",
    r"^\s*from\s+random\s+import\s+(?!Random\b)",
    # host clock
    r"\bdate\.today\s*\(",
    r"\bdatetime\.now\s*\(",
    r"\bdatetime\.utcnow\s*\(",
    r"\btime\.time\s*\(",
]

EXCLUDE_DIRS = {
    ".git",
    "__pycache__",
    ".venv",
    "venv",
    "build",
    "dist",
    "tests",
}

EXCLUDE_FILES = {
    # This checker itself.
    "check_explicit_rng.py",
}


def iter_py_files(root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dn = Path(dirpath)
        dirnames[:] = [d for d in dirnames if d not in EXCLUDE_DIRS and not d.endswith(".egg-info")]
        for fn in filenames:
            if fn.endswith(".py") and fn not in EXCLUDE_FILES:
                yield dn / fn


def find_violations(root: Optional[Path] = None) -> List[Tuple[Path, int, str, str]]:
    root = root or Path(__file__).resolve().parents[1]
    compiled = [re.compile(p) for p in FORBIDDEN_PATTERNS]

    hits: List[Tuple[Path, int, str, str]] = []
    for fp in iter_py_files(root):
        text = fp.read_text(encoding="utf-8")
        for i, line in enumerate(text.splitlines(), start=1):
            for rx in compiled:
                if rx.search(line):
                    hits.append((fp.relative_to(root), i, line.strip(), rx.pattern))
    return hits


def main() -> int:
    hits = find_violations()
    if not hits:
        print("[OK] No hidden randomness or clock usage found.")
        return 0

    print("[FAIL] Hidden randomness or clock usage found:\n")
    for rel, ln, line, pat in hits:
        print(f"- {rel}:{ln}: {line}")
        print(f"  matched: {pat}")
    print("\nFix: take an explicit random.Random (rng=...) and pass dates in.")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
