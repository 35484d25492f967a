"""
Rock Identification Data Model
암석 식별 데이터 모델 정의
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .reference_data import normalize_rock_name


UNKNOWN = "unknown"


def _text(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def _strings(data: Dict[str, Any], key: str) -> Tuple[str, ...]:
    """문자열 리스트 필드 (없으면 빈 튜플)"""
    value = data.get(key) or ()
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{key} must be a list of strings")
    return tuple(value)


class RockType(str, Enum):
    """암석 성인 분류"""
    IGNEOUS = "igneous"
    METAMORPHIC = "metamorphic"
    SEDIMENTARY = "sedimentary"


@dataclass(frozen=True)
class Characteristics:
    """
    자유 텍스트에서 추출한 지질학적 특징

    Attributes:
        texture: coarse / fine / layered / foliated / crystalline / glassy / vesicular
        color: dark / light / red / green / gray / brown
        hardness: hard / soft
        luster: metallic / dull / vitreous
        crystal_size: large / small / none
        keywords: 입력의 소문자 토큰 (공백 분리, 순서 유지)
        dominant_colors: 이미지 분석 색상 (매칭에는 사용하지 않음)
    """
    texture: str = UNKNOWN
    color: str = UNKNOWN
    hardness: str = UNKNOWN
    luster: str = UNKNOWN
    crystal_size: str = UNKNOWN
    keywords: Tuple[str, ...] = ()
    dominant_colors: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "texture": self.texture,
            "color": self.color,
            "hardness": self.hardness,
            "luster": self.luster,
            "crystalSize": self.crystal_size,
            "keywords": list(self.keywords),
            "dominantColors": list(self.dominant_colors),
        }


@dataclass(frozen=True)
class Identification:
    """분류기 출력 (암석명, 성인, 신뢰도, 형성 과정)"""
    name: str
    rock_type: RockType
    confidence: int
    formation: str
    subtype: str
    texture_type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.rock_type.value,
            "confidence": self.confidence,
            "formation": self.formation,
            "subtype": self.subtype,
            "textureType": self.texture_type,
        }


@dataclass(frozen=True)
class Classification:
    group: str
    family: Optional[str] = None
    series: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        data = {"group": self.group}
        if self.family:
            data["family"] = self.family
        if self.series:
            data["series"] = self.series
        return data


@dataclass(frozen=True)
class EnrichedRock:
    """참조 데이터가 결합된 식별 결과"""
    identification: Identification
    locations: Tuple[str, ...] = ()
    composition: Tuple[str, ...] = ()
    uses: Tuple[str, ...] = ()
    classification: Classification = field(default_factory=lambda: Classification(group=UNKNOWN))
    fun_facts: Tuple[str, ...] = ()
    image: Optional[str] = None

    @property
    def name(self) -> str:
        return self.identification.name

    @property
    def rock_type(self) -> RockType:
        return self.identification.rock_type

    @property
    def formation(self) -> str:
        return self.identification.formation

    def to_dict(self) -> Dict[str, Any]:
        """웹 클라이언트용 camelCase JSON 형태로 변환"""
        data = self.identification.to_dict()
        data.update({
            "locations": list(self.locations),
            "composition": list(self.composition),
            "uses": list(self.uses),
            "classification": self.classification.to_dict(),
            "funFacts": list(self.fun_facts),
        })
        if self.image:
            data["image"] = self.image
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnrichedRock":
        """
        클라이언트가 보낸 rockContext 딕셔너리에서 복원

        누락된 필드는 빈 값으로 채우고, 암석명은 카탈로그 이름으로 정규화한다.
        rock type, 필드 형태가 잘못되면 ValueError.
        """
        if not isinstance(data, dict):
            raise ValueError("rock context must be an object")
        classification = data.get("classification") or {}
        if not isinstance(classification, dict):
            raise ValueError("classification must be an object")

        name = _text(data, "name") or "Unknown Rock"
        identification = Identification(
            name=normalize_rock_name(name) or name,
            rock_type=RockType(data.get("type") or data.get("rockType") or RockType.IGNEOUS.value),
            confidence=int(data.get("confidence") or 0),
            formation=_text(data, "formation") or "",
            subtype=_text(data, "subtype") or UNKNOWN,
            texture_type=_text(data, "textureType") or UNKNOWN,
        )
        return cls(
            identification=identification,
            locations=_strings(data, "locations"),
            composition=_strings(data, "composition"),
            uses=_strings(data, "uses"),
            classification=Classification(
                group=_text(classification, "group") or f"{identification.rock_type.value} rock",
                family=_text(classification, "family"),
                series=_text(classification, "series"),
            ),
            fun_facts=_strings(data, "funFacts"),
            image=_text(data, "image"),
        )
