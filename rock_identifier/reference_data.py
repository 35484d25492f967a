"""
Rock Reference Data
암석 카탈로그 및 정적 참조 테이블

Process-wide read-only tables keyed by rock name or rock type.
Curated by hand; no external dependencies.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple


# =============================================================================
# 1. ROCK_CATALOG: identifiable rocks
# =============================================================================

ROCK_CATALOG: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "Granite": MappingProxyType({"type": "igneous", "subtype": "plutonic"}),
    "Basalt": MappingProxyType({"type": "igneous", "subtype": "volcanic"}),
    "Obsidian": MappingProxyType({"type": "igneous", "subtype": "volcanic"}),
    "Pumice": MappingProxyType({"type": "igneous", "subtype": "volcanic"}),
    "Scoria": MappingProxyType({"type": "igneous", "subtype": "volcanic"}),
    "Limestone": MappingProxyType({"type": "sedimentary", "subtype": "chemical"}),
    "Sandstone": MappingProxyType({"type": "sedimentary", "subtype": "clastic"}),
    "Shale": MappingProxyType({"type": "sedimentary", "subtype": "clastic"}),
    "Schist": MappingProxyType({"type": "metamorphic", "subtype": "foliated"}),
    "Gneiss": MappingProxyType({"type": "metamorphic", "subtype": "foliated"}),
    "Quartzite": MappingProxyType({"type": "metamorphic", "subtype": "non-foliated"}),
    "Marble": MappingProxyType({"type": "metamorphic", "subtype": "non-foliated"}),
})

# 암석명 별칭 매핑 (직접 언급 판정, rockContext 이름 정규화에 사용)
ROCK_ALIASES: Mapping[str, str] = MappingProxyType({
    "lime": "Limestone",
    "chalk": "Limestone",
    "mudstone": "Shale",
})


# =============================================================================
# 2. DEFAULT_LOCATIONS: by rock type
# =============================================================================

DEFAULT_LOCATIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "igneous": ("Volcanic regions", "Mountain ranges", "Oceanic islands", "Continental margins"),
    "sedimentary": ("River valleys", "Ocean floors", "Desert basins", "Coastal plains"),
    "metamorphic": ("Mountain cores", "Continental shields", "Collision zones", "Deep crustal regions"),
})


# =============================================================================
# 3. Per-rock tables
# =============================================================================

COMPOSITION: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Granite": ("Quartz (25-35%)", "Feldspar (50-60%)", "Mica (5-15%)", "Hornblende"),
    "Basalt": ("Plagioclase feldspar", "Pyroxene", "Olivine", "Magnetite"),
    "Obsidian": ("Volcanic glass", "Silica (70-75%)", "Minimal crystals"),
    "Pumice": ("Volcanic glass", "Silica", "Gas bubbles (vesicles)"),
    "Scoria": ("Basaltic glass", "Pyroxene", "Plagioclase", "Olivine"),
    "Limestone": ("Calcite (CaCO3)", "Aragonite", "Dolomite", "Fossil fragments"),
    "Sandstone": ("Quartz (dominant)", "Feldspar", "Rock fragments", "Clay minerals"),
    "Shale": ("Clay minerals", "Quartz", "Feldspar", "Organic matter"),
    "Schist": ("Mica", "Quartz", "Feldspar", "Garnet", "Staurolite"),
    "Gneiss": ("Feldspar", "Quartz", "Biotite", "Hornblende"),
    "Quartzite": ("Quartz (>95%)", "Minor feldspar", "Mica traces"),
    "Marble": ("Recrystallized calcite", "Dolomite", "Minor graphite", "Mica traces"),
})

USES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Granite": ("Construction material", "Countertops", "Monuments", "Road aggregate"),
    "Basalt": ("Road construction", "Railroad ballast", "Concrete aggregate", "Stone tools"),
    "Obsidian": ("Surgical instruments", "Decorative objects", "Archaeological tools"),
    "Pumice": ("Abrasive material", "Concrete aggregate", "Horticulture", "Personal care"),
    "Scoria": ("Landscaping", "Construction aggregate", "Drainage material"),
    "Limestone": ("Cement production", "Building stone", "Agricultural lime", "Steel production"),
    "Sandstone": ("Building stone", "Paving material", "Glass manufacturing", "Filtration"),
    "Shale": ("Brick manufacturing", "Ceramic production", "Oil and gas extraction"),
    "Schist": ("Roofing material", "Decorative stone", "Road construction"),
    "Gneiss": ("Building stone", "Flooring", "Decorative facing stone"),
    "Quartzite": ("Construction aggregate", "Railroad ballast", "Roofing granules"),
    "Marble": ("Sculpture", "Building facades", "Flooring", "Calcium supplements"),
})

CLASSIFICATION: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "Granite": MappingProxyType({"group": "Felsic Intrusive", "family": "Granitoid", "series": "Alkali Feldspar"}),
    "Basalt": MappingProxyType({"group": "Mafic Extrusive", "family": "Basaltic", "series": "Tholeiitic"}),
    "Obsidian": MappingProxyType({"group": "Felsic Extrusive", "family": "Volcanic Glass"}),
    "Pumice": MappingProxyType({"group": "Pyroclastic", "family": "Volcanic Glass"}),
    "Scoria": MappingProxyType({"group": "Pyroclastic", "family": "Basaltic"}),
    "Limestone": MappingProxyType({"group": "Carbonate", "family": "Calcitic"}),
    "Sandstone": MappingProxyType({"group": "Clastic", "family": "Arenaceous"}),
    "Shale": MappingProxyType({"group": "Clastic", "family": "Argillaceous"}),
    "Schist": MappingProxyType({"group": "Foliated", "family": "Regional Metamorphic"}),
    "Gneiss": MappingProxyType({"group": "Foliated", "family": "High-grade Metamorphic"}),
    "Quartzite": MappingProxyType({"group": "Non-foliated", "family": "Contact Metamorphic"}),
    "Marble": MappingProxyType({"group": "Non-foliated", "family": "Carbonate Metamorphic"}),
})

FUN_FACTS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Granite": (
        "Granite makes up about 70-80% of the Earth's continental crust",
        'The word "granite" comes from the Latin "granum" meaning grain',
        "Some granite formations are over 3 billion years old",
    ),
    "Basalt": (
        "Basalt covers about 70% of the Earth's surface, mostly on ocean floors",
        "The dark patches on the Moon (maria) are ancient basalt flows",
        "Basalt can form hexagonal columns when it cools slowly",
    ),
    "Limestone": (
        "The Great Pyramid of Giza is built primarily from limestone blocks",
        "Limestone can contain fossils of ancient marine life",
        "Acid rain can dissolve limestone, forming caves and sinkholes",
    ),
    "Obsidian": (
        "Obsidian edges can be sharper than steel surgical scalpels",
        "Ancient cultures traded obsidian across hundreds of kilometres",
    ),
    "Pumice": (
        "Pumice is so full of gas bubbles that it can float on water",
        "Rafts of floating pumice can drift across oceans after an eruption",
    ),
    "Sandstone": (
        "The red colour of many sandstones comes from iron oxide coating the grains",
        "Sandstone can preserve ancient sand dune structures for millions of years",
    ),
    "Marble": (
        "Michelangelo's David was carved from Carrara marble",
        "Marble fizzes in dilute acid because it is made of calcite",
    ),
})


# =============================================================================
# Lookup helpers
# =============================================================================

def normalize_rock_name(name: str) -> Optional[str]:
    """암석명/별칭을 카탈로그 이름으로 정규화 (없으면 None)"""
    if not name:
        return None
    key = name.strip().lower()
    for rock_name in ROCK_CATALOG:
        if rock_name.lower() == key:
            return rock_name
    return ROCK_ALIASES.get(key)


def get_catalog() -> List[str]:
    """식별 가능한 암석 목록 반환"""
    return list(ROCK_CATALOG.keys())


def get_default_locations(rock_type: str) -> Tuple[str, ...]:
    return DEFAULT_LOCATIONS.get(rock_type, ("Worldwide distribution",))


def get_composition(rock_name: str) -> Tuple[str, ...]:
    return COMPOSITION.get(rock_name, ("Mineral composition varies",))


def get_uses(rock_name: str) -> Tuple[str, ...]:
    return USES.get(rock_name, ("Various industrial and construction applications",))


def get_classification(rock_name: str, rock_type: str) -> Dict[str, str]:
    """분류 체계 반환 (미등록 암석은 rock_type 기반 그룹)"""
    entry = CLASSIFICATION.get(rock_name)
    if entry is None:
        return {"group": f"{rock_type} rock"}
    return dict(entry)


def get_fun_facts(rock_name: str) -> Tuple[str, ...]:
    return FUN_FACTS.get(
        rock_name,
        (f"{rock_name} has unique geological properties that make it scientifically interesting.",),
    )
