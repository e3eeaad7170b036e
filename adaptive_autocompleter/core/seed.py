# seed.py
# Reference terms the portal starts with. Loaded through
# SearchSession.load_seed(), which forces is_user_generated=False.

from __future__ import annotations
from typing import List, Tuple

# (text, category, frequency, direct_answer)
SeedEntry = Tuple[str, str, int, str]

# seeded timestamps are spread up to this far into the past
DEFAULT_MAX_AGE_SECONDS = 10_000.0

SAMPLE_TERMS: List[SeedEntry] = [
    ("machine learning basics", "AI", 150,
     "Machine learning is a subset of AI that enables systems to learn from data."),
    ("machine learning algorithms", "AI", 120,
     "Common algorithms include neural networks, decision trees, and SVMs."),
    ("react hooks tutorial", "Programming", 200,
     "React Hooks are functions that let you use state and lifecycle features in functional components."),
    ("react native development", "Programming", 180, ""),
    ("python data science", "Programming", 190, ""),
    ("python web scraping", "Programming", 95, ""),
    ("javascript promises", "Programming", 140, ""),
    ("javascript async await", "Programming", 160, ""),
    ("docker containers explained", "DevOps", 110, ""),
    ("kubernetes orchestration", "DevOps", 85, ""),
    ("aws cloud services", "Cloud", 175, ""),
    ("azure deployment", "Cloud", 90, ""),
    ("neural networks deep learning", "AI", 130, ""),
    ("natural language processing", "AI", 105, ""),
    ("database optimization tips", "Database", 88, ""),
    ("sql query performance", "Database", 92, ""),
]
