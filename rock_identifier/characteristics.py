"""
Characteristic Extractor
자유 텍스트 설명 → 지질학적 특징

Each dimension is an ordered list of (pattern, label) rules. Every rule is
tested against the whole description and the label of the LAST matching rule
is kept, so a later rule overwrites an earlier one in the same dimension.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Pattern, Tuple

from .models import UNKNOWN, Characteristics

logger = logging.getLogger(__name__)

Rule = Tuple[Pattern[str], str]


def _rules(*pairs: Tuple[str, str]) -> Tuple[Rule, ...]:
    return tuple((re.compile(pattern), label) for pattern, label in pairs)


TEXTURE_RULES = _rules(
    (r"coarse|rough|grainy|granular", "coarse"),
    (r"fine|smooth", "fine"),
    (r"layer|bedding|bedded|strata|stratified", "layered"),
    (r"foliat|banded|bands|schistose|flaky|sheets", "foliated"),
    (r"crystalline|sugary", "crystalline"),
    (r"glass", "glassy"),
    (r"porous|holes|vesicul|bubbl|foam|frothy|spongy", "vesicular"),
)

COLOR_RULES = _rules(
    (r"dark|black", "dark"),
    (r"light|white|pale|cream", "light"),
    (r"\bred|pink|\brust", "red"),
    (r"green", "green"),
    (r"gray|grey", "gray"),
    (r"brown|\btan\b|buff", "brown"),
)

HARDNESS_RULES = _rules(
    (r"\bhard(?!ness)|difficult to scratch|scratches glass", "hard"),
    (r"soft|easy to scratch|crumbl|fingernail", "soft"),
)

LUSTER_RULES = _rules(
    (r"shiny|metallic|sparkl|glitter", "metallic"),
    (r"dull|earthy|matte", "dull"),
    (r"glassy|vitreous|glossy", "vitreous"),
)

CRYSTAL_SIZE_RULES = _rules(
    (r"large crystals|big crystals|visible crystals|coarse-grained|phaneritic", "large"),
    (r"small crystals|tiny crystals|fine-grained|aphanitic", "small"),
    (r"no crystals|no visible crystals|glass", "none"),
)

DIMENSIONS: Dict[str, Tuple[Rule, ...]] = {
    "texture": TEXTURE_RULES,
    "color": COLOR_RULES,
    "hardness": HARDNESS_RULES,
    "luster": LUSTER_RULES,
    "crystal_size": CRYSTAL_SIZE_RULES,
}


def match_last(text: str, rules: Iterable[Rule]) -> str:
    """규칙을 선언 순서대로 모두 평가하고 마지막으로 일치한 라벨 반환"""
    label = UNKNOWN
    for pattern, candidate in rules:
        if pattern.search(text):
            label = candidate
    return label


def tokenize(text: str) -> List[str]:
    return text.lower().split()


def extract_characteristics(
    description: Optional[str] = None,
    image_analysis: Optional[Dict[str, Any]] = None,
) -> Characteristics:
    """
    설명 텍스트에서 특징 추출

    Args:
        description: 암석에 대한 자유 텍스트 설명 (없어도 됨)
        image_analysis: {"colors": [...], "texture": ..., "patterns": [...]}
            colors만 dominant_colors로 전달되며 매칭에는 쓰이지 않음

    Returns:
        Characteristics (입력이 없으면 모든 차원이 "unknown")
    """
    text = (description or "").lower()

    labels = {name: UNKNOWN for name in DIMENSIONS}
    if text:
        for name, rules in DIMENSIONS.items():
            labels[name] = match_last(text, rules)

    dominant_colors: Tuple[str, ...] = ()
    if image_analysis and image_analysis.get("colors"):
        dominant_colors = tuple(str(c) for c in image_analysis["colors"])

    characteristics = Characteristics(
        keywords=tuple(tokenize(text)),
        dominant_colors=dominant_colors,
        **labels,
    )
    logger.debug("Extracted characteristics: %s", characteristics)
    return characteristics
