"""
Rule-Based Rock Classifier
특징 → 암석 식별 (순서가 있는 결정 리스트)

Branches are evaluated strictly in order and the first one that fires wins:

    Tier 1  the description names a rock (or a close synonym)
    Tier 2  characteristic patterns, in fixed priority order
    Tier 3  broad colour / hardness fallbacks
    Tier 4  inconclusive default (Granite, 55)

Every branch returns a fixed Identification; nothing depends on time or
randomness, so the same input always classifies the same way.
"""

import logging
import string
from typing import Callable, Dict, FrozenSet, Optional, Tuple

from .characteristics import extract_characteristics
from .models import Characteristics, Identification, RockType
from .reference_data import ROCK_ALIASES, ROCK_CATALOG

logger = logging.getLogger(__name__)


FORMATIONS: Dict[str, str] = {
    "Granite": "Formed from slow cooling of felsic magma deep within the Earth's crust",
    "Basalt": "Formed from rapid cooling of mafic lava flows on the Earth's surface",
    "Obsidian": "Formed from rapid cooling of volcanic glass, preventing crystal formation",
    "Pumice": "Formed from gas-filled volcanic eruptions that create a frothy, lightweight rock",
    "Scoria": "Formed from basaltic or andesitic magma during Strombolian eruptions",
    "Limestone": "Formed from accumulation of marine organisms and chemical precipitation in warm, shallow seas",
    "Sandstone": "Formed from cementation of sand-sized mineral particles, primarily quartz",
    "Shale": "Formed from compaction of clay and silt particles in quiet water environments",
    "Schist": "Formed from medium-grade metamorphism of shale or other fine-grained rocks",
    "Gneiss": "Formed from high-grade metamorphism that segregates minerals into light and dark bands",
    "Quartzite": "Formed from metamorphism of sandstone under high pressure and temperature",
    "Marble": "Formed from metamorphism of limestone, recrystallizing calcite into interlocking grains",
}

TEXTURE_TYPES: Dict[str, str] = {
    "Granite": "phaneritic",
    "Basalt": "aphanitic",
    "Obsidian": "glassy",
    "Pumice": "vesicular",
    "Scoria": "vesicular",
    "Limestone": "crystalline",
    "Sandstone": "medium-grained",
    "Shale": "fine-grained",
    "Schist": "schistose",
    "Gneiss": "gneissic",
    "Quartzite": "granoblastic",
    "Marble": "granoblastic",
}

INCONCLUSIVE_FORMATION = (
    "Identification is inconclusive: the description did not match any distinctive "
    "characteristics, so the most common continental crust rock is suggested"
)


def _identify(name: str, confidence: int, formation: Optional[str] = None) -> Identification:
    entry = ROCK_CATALOG[name]
    return Identification(
        name=name,
        rock_type=RockType(entry["type"]),
        confidence=confidence,
        formation=formation or FORMATIONS[name],
        subtype=entry["subtype"],
        texture_type=TEXTURE_TYPES[name],
    )


# =============================================================================
# Tier 1: direct mentions
# =============================================================================

def _mention_words(name: str) -> FrozenSet[str]:
    """암석명 + ROCK_ALIASES에 등록된 별칭"""
    aliases = {alias for alias, target in ROCK_ALIASES.items() if target == name}
    return frozenset({name.lower()} | aliases)


DIRECT_MENTIONS: Tuple[Tuple[FrozenSet[str], Identification], ...] = (
    (_mention_words("Obsidian"), _identify("Obsidian", 90)),
    (_mention_words("Pumice"), _identify("Pumice", 87)),
    (_mention_words("Scoria"), _identify("Scoria", 85)),
    (_mention_words("Granite"), _identify("Granite", 88)),
    (_mention_words("Basalt"), _identify("Basalt", 88)),
    (_mention_words("Limestone"), _identify("Limestone", 86)),
    (_mention_words("Sandstone"), _identify("Sandstone", 86)),
    (_mention_words("Shale"), _identify("Shale", 84)),
    (_mention_words("Schist"), _identify("Schist", 84)),
    (_mention_words("Gneiss"), _identify("Gneiss", 84)),
    (_mention_words("Quartzite"), _identify("Quartzite", 85)),
    (_mention_words("Marble"), _identify("Marble", 88)),
)


def _keyword_set(c: Characteristics) -> FrozenSet[str]:
    return frozenset(k.strip(string.punctuation) for k in c.keywords)


def direct_mention(c: Characteristics) -> Optional[Identification]:
    keywords = _keyword_set(c)
    for synonyms, identification in DIRECT_MENTIONS:
        if keywords & synonyms:
            return identification
    return None


# =============================================================================
# Tier 2: characteristic patterns
# =============================================================================

OBSIDIAN = _identify("Obsidian", 85)
PUMICE = _identify("Pumice", 80)
SCORIA = _identify("Scoria", 75)
GRANITE_COARSE_LIGHT = _identify("Granite", 82)
SANDSTONE_COARSE_SOFT = _identify("Sandstone", 70)
GRANITE_COARSE = _identify("Granite", 72)
BASALT_FINE_DARK = _identify("Basalt", 78)
SHALE_LAYERED = _identify("Shale", 70)
SANDSTONE_LAYERED = _identify("Sandstone", 72)
LIMESTONE_SOFT_LIGHT = _identify("Limestone", 75)
SANDSTONE_SAND = _identify("Sandstone", 74)
SCHIST_FOLIATED = _identify("Schist", 72)
GNEISS_FOLIATED = _identify("Gneiss", 70)
MARBLE_CRYSTALLINE = _identify("Marble", 73)
QUARTZITE_CRYSTALLINE = _identify("Quartzite", 74)


def glassy(c: Characteristics) -> Optional[Identification]:
    if c.texture == "glassy":
        return OBSIDIAN
    return None


def vesicular(c: Characteristics) -> Optional[Identification]:
    if c.texture == "vesicular":
        return PUMICE if c.color == "light" else SCORIA
    return None


def coarse_or_large_crystals(c: Characteristics) -> Optional[Identification]:
    if c.texture == "coarse" or c.crystal_size == "large":
        if c.color == "light":
            return GRANITE_COARSE_LIGHT
        if c.hardness == "soft":
            return SANDSTONE_COARSE_SOFT
        return GRANITE_COARSE
    return None


def fine_and_dark(c: Characteristics) -> Optional[Identification]:
    if c.texture == "fine" and c.color == "dark":
        return BASALT_FINE_DARK
    return None


def layered(c: Characteristics) -> Optional[Identification]:
    if c.texture == "layered" or "bedding" in _keyword_set(c):
        return SHALE_LAYERED if c.hardness == "soft" else SANDSTONE_LAYERED
    return None


def soft_and_light(c: Characteristics) -> Optional[Identification]:
    if c.hardness == "soft" and c.color == "light":
        return LIMESTONE_SOFT_LIGHT
    return None


def sand_keyword(c: Characteristics) -> Optional[Identification]:
    if any("sand" in k for k in c.keywords):
        return SANDSTONE_SAND
    return None


def foliated(c: Characteristics) -> Optional[Identification]:
    if c.texture == "foliated":
        return SCHIST_FOLIATED if c.luster == "metallic" else GNEISS_FOLIATED
    return None


def crystalline_or_vitreous(c: Characteristics) -> Optional[Identification]:
    if c.texture == "crystalline" or c.luster == "vitreous":
        return MARBLE_CRYSTALLINE if c.hardness == "soft" else QUARTZITE_CRYSTALLINE
    return None


# =============================================================================
# Tier 3 / 4: fallbacks
# =============================================================================

BASALT_DARK = _identify("Basalt", 62)
GRANITE_LIGHT = _identify("Granite", 60)
LIMESTONE_SOFT = _identify("Limestone", 58)
INCONCLUSIVE = _identify("Granite", 55, formation=INCONCLUSIVE_FORMATION)


def dark_color(c: Characteristics) -> Optional[Identification]:
    return BASALT_DARK if c.color == "dark" else None


def light_color(c: Characteristics) -> Optional[Identification]:
    return GRANITE_LIGHT if c.color == "light" else None


def soft_hardness(c: Characteristics) -> Optional[Identification]:
    return LIMESTONE_SOFT if c.hardness == "soft" else None


Branch = Callable[[Characteristics], Optional[Identification]]

# 평가 순서가 곧 우선순위 (순서 변경 시 결과가 달라짐)
DECISION_LIST: Tuple[Tuple[str, Branch], ...] = (
    ("direct_mention", direct_mention),
    ("glassy", glassy),
    ("vesicular", vesicular),
    ("coarse_or_large_crystals", coarse_or_large_crystals),
    ("fine_and_dark", fine_and_dark),
    ("layered", layered),
    ("soft_and_light", soft_and_light),
    ("sand_keyword", sand_keyword),
    ("foliated", foliated),
    ("crystalline_or_vitreous", crystalline_or_vitreous),
    ("dark_color", dark_color),
    ("light_color", light_color),
    ("soft_hardness", soft_hardness),
)


def classify_rock(characteristics: Characteristics) -> Identification:
    """
    결정 리스트를 순서대로 평가하여 첫 번째로 일치한 분기의 식별 결과 반환

    Never fails; when nothing matches the inconclusive Granite (55) is returned.
    """
    for branch_name, branch in DECISION_LIST:
        identification = branch(characteristics)
        if identification is not None:
            logger.info(
                "Classified as %s (%d%%) by rule '%s'",
                identification.name, identification.confidence, branch_name,
            )
            return identification

    logger.info("No rule matched; returning inconclusive default")
    return INCONCLUSIVE


def identify_rock(description=None, image_analysis=None) -> Identification:
    """설명 텍스트 → 특징 추출 → 분류"""
    return classify_rock(extract_characteristics(description, image_analysis))
