"""
Data model for Hugging Face Hub catalog records.

Records are plain dataclasses built from the Hub JSON payloads with
``from_dict``. Parsing is lenient: missing or mistyped fields fall back to
empty defaults instead of raising.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as returned by the Hub (``...Z`` suffix)."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat().replace("+00:00", "Z")


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    return value if isinstance(value, int) else 0


def _bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _parse_gated(value: Any) -> bool:
    """
    Normalize the ``gated`` field.

    The Hub sends either a boolean or a string ("auto", "manual", "false").
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value != "" and value != "false"
    return False


def author_from_id(model_id: str) -> str:
    """Return the namespace part of ``org/name``, or "" for bare ids."""
    if "/" in model_id:
        return model_id.split("/", 1)[0]
    return ""


# ============================================================
# Single-or-list card fields
# ============================================================

@dataclass(frozen=True)
class Single:
    """A card field given as one string."""
    value: str

    @property
    def first(self) -> str:
        return self.value

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Multiple:
    """A card field given as a list of strings."""
    values: List[str] = field(default_factory=list)

    @property
    def first(self) -> str:
        return self.values[0] if self.values else ""

    def to_json(self) -> Any:
        return list(self.values)


OneOrMany = Union[Single, Multiple]


def parse_one_or_many(value: Any) -> OneOrMany:
    """
    Build a OneOrMany from a JSON value.

    Strings become Single, lists become Multiple (non-string items are
    dropped), anything else becomes an empty Multiple.
    """
    if isinstance(value, str):
        return Single(value)
    if isinstance(value, list):
        return Multiple([v for v in value if isinstance(v, str)])
    return Multiple()


# ============================================================
# Catalog records
# ============================================================

@dataclass
class Model:
    """
    Summary record returned by the model listing endpoint.

    Attributes:
        id: Repository id (e.g. "google/gemma-2b-it")
        author: Namespace derived from the id
        downloads: Download count
        likes: Like count
        last_modified: Last commit time, if reported
        library_name: Library tag (e.g. "transformers")
        pipeline_tag: Task tag (e.g. "text-generation")
        private: Whether the repository is private
        gated: Whether access requires approval
        trending_score: Hub trending score
    """
    id: str
    author: str = ""
    downloads: int = 0
    likes: int = 0
    last_modified: Optional[datetime] = None
    library_name: str = ""
    pipeline_tag: str = ""
    private: bool = False
    gated: bool = False
    trending_score: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Model":
        model_id = _str(data.get("id"))
        trending = data.get("trendingScore", 0.0)
        return cls(
            id=model_id,
            author=author_from_id(model_id),
            downloads=_int(data.get("downloads")),
            likes=_int(data.get("likes")),
            last_modified=_parse_datetime(data.get("lastModified")),
            library_name=_str(data.get("library_name")),
            pipeline_tag=_str(data.get("pipeline_tag")),
            private=_bool(data.get("private")),
            gated=_parse_gated(data.get("gated")),
            trending_score=float(trending) if isinstance(trending, (int, float)) else 0.0,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using Hub field names; empty optional fields are omitted."""
        result: Dict[str, Any] = {
            "id": self.id,
            "author": self.author,
            "downloads": self.downloads,
            "likes": self.likes,
        }
        if self.last_modified is not None:
            result["lastModified"] = _format_datetime(self.last_modified)
        if self.library_name:
            result["library_name"] = self.library_name
        if self.pipeline_tag:
            result["pipeline_tag"] = self.pipeline_tag
        result["private"] = self.private
        if self.gated:
            result["gated"] = self.gated
        if self.trending_score:
            result["trending_score"] = self.trending_score
        return result


@dataclass
class ListModelsOptions:
    """Filter and sort criteria for listing models. Empty fields are not sent."""
    search: str = ""
    filter: str = ""
    author: str = ""
    pipeline_tag: str = ""
    library_name: str = ""
    language: str = ""
    tag: str = ""
    limit: int = 0
    sort: str = ""
    direction: int = 0
    token: str = ""

    def to_params(self) -> Dict[str, str]:
        """
        Build the query parameters for the listing endpoint.

        Returns:
            Ordered mapping of wire parameter names to values
        """
        params: Dict[str, str] = {}
        string_params = [
            ("search", self.search),
            ("filter", self.filter),
            ("author", self.author),
            ("pipeline_tag", self.pipeline_tag),
            ("library", self.library_name),
            ("language", self.language),
            ("tags", self.tag),
        ]
        for key, value in string_params:
            if value:
                params[key] = value
        if self.limit > 0:
            params["limit"] = str(self.limit)
        if self.sort:
            params["sort"] = self.sort
        if self.direction != 0:
            params["direction"] = str(self.direction)
        return params


@dataclass
class Sibling:
    """A file in a model repository."""
    rfilename: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sibling":
        return cls(rfilename=_str(data.get("rfilename")))


@dataclass
class CardData:
    """Model card metadata. ``base_model`` and ``license`` may be one or many."""
    model_name: str = ""
    model_type: str = ""
    base_model: OneOrMany = field(default_factory=Multiple)
    license: OneOrMany = field(default_factory=Multiple)
    quantized_by: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "CardData":
        if not isinstance(data, dict):
            return cls()
        return cls(
            model_name=_str(data.get("model_name")),
            model_type=_str(data.get("model_type")),
            base_model=parse_one_or_many(data.get("base_model")),
            license=parse_one_or_many(data.get("license")),
            quantized_by=_str(data.get("quantized_by")),
        )

    def get_base_model(self) -> str:
        """Return the base model (first one if several)."""
        return self.base_model.first

    def get_license(self) -> str:
        """Return the license (first one if several)."""
        return self.license.first

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model_name": self.model_name,
            "model_type": self.model_type,
            "base_model": self.base_model.to_json(),
            "license": self.license.to_json(),
            "quantized_by": self.quantized_by,
        }


@dataclass
class GGUFInfo:
    """GGUF-specific information reported by the Hub."""
    total: int = 0
    architecture: str = ""
    context_length: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Optional["GGUFInfo"]:
        if not isinstance(data, dict):
            return None
        return cls(
            total=_int(data.get("total")),
            architecture=_str(data.get("architecture")),
            context_length=_int(data.get("context_length")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "architecture": self.architecture,
            "context_length": self.context_length,
        }


@dataclass
class ModelDetails:
    """
    Detailed model record, including the repository file listing.

    Attributes:
        siblings: Files in the repository (source of quantization labels)
        card_data: Parsed model card metadata
        gguf: GGUF info, only present for GGUF repositories
    """
    id: str
    author: str = ""
    downloads: int = 0
    likes: int = 0
    last_modified: Optional[datetime] = None
    pipeline_tag: str = ""
    library_name: str = ""
    tags: List[str] = field(default_factory=list)
    siblings: List[Sibling] = field(default_factory=list)
    card_data: CardData = field(default_factory=CardData)
    gguf: Optional[GGUFInfo] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelDetails":
        tags = data.get("tags")
        siblings = data.get("siblings")
        return cls(
            id=_str(data.get("id")),
            author=_str(data.get("author")),
            downloads=_int(data.get("downloads")),
            likes=_int(data.get("likes")),
            last_modified=_parse_datetime(data.get("lastModified")),
            pipeline_tag=_str(data.get("pipeline_tag")),
            library_name=_str(data.get("library_name")),
            tags=[t for t in tags if isinstance(t, str)] if isinstance(tags, list) else [],
            siblings=[
                Sibling.from_dict(s) for s in siblings if isinstance(s, dict)
            ] if isinstance(siblings, list) else [],
            card_data=CardData.from_dict(data.get("cardData")),
            gguf=GGUFInfo.from_dict(data.get("gguf")),
        )

    @property
    def filenames(self) -> List[str]:
        """Repository-relative filenames, in listing order."""
        return [s.rfilename for s in self.siblings]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author,
            "downloads": self.downloads,
            "likes": self.likes,
            "lastModified": _format_datetime(self.last_modified),
            "pipeline_tag": self.pipeline_tag,
            "library_name": self.library_name,
            "tags": list(self.tags),
            "siblings": [{"rfilename": s.rfilename} for s in self.siblings],
            "cardData": self.card_data.to_dict(),
            "gguf": self.gguf.to_dict() if self.gguf else None,
        }
