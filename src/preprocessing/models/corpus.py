"""
Pydantic models for the document corpus.

Contains the document record, the ordered corpus, and the diagnostics
produced by normalization and empty-document filtering.
"""

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Document(BaseModel):
    """Single plot synopsis, identified by its position in the input collection."""
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Position in the original input")
    text: str

    @property
    def tokens(self) -> List[str]:
        return self.text.split()

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


class Corpus(BaseModel):
    """
    Ordered collection of documents.

    Order is significant: a document's position correlates it back to its
    source row through ``Document.index``.
    """
    model_config = ConfigDict(frozen=True)

    documents: Tuple[Document, ...] = ()

    @field_validator('documents')
    @classmethod
    def validate_ordering(cls, v: Tuple[Document, ...]) -> Tuple[Document, ...]:
        """Source indices must be strictly increasing."""
        for prev, curr in zip(v, v[1:]):
            if curr.index <= prev.index:
                raise ValueError(
                    f"Corpus documents out of order: index {curr.index} follows {prev.index}"
                )
        return v

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self):
        return iter(self.documents)

    def __getitem__(self, position: int) -> Document:
        return self.documents[position]

    def get_texts(self) -> List[str]:
        """Get all document texts as a list"""
        return [doc.text for doc in self.documents]

    def get_tokens(self) -> List[List[str]]:
        """Get whitespace tokens for every document"""
        return [doc.tokens for doc in self.documents]

    @property
    def source_indices(self) -> List[int]:
        return [doc.index for doc in self.documents]


class NormalizationReport(BaseModel):
    """
    Empty-document counts observed after each normalization stage.

    Attributes:
        num_documents: Number of documents normalized
        empty_after_stage: Stage name -> number of empty documents after that
            stage, in the order the stages ran
    """
    num_documents: int = Field(..., ge=0)
    empty_after_stage: Dict[str, int] = Field(default_factory=dict)

    @field_validator('empty_after_stage')
    @classmethod
    def validate_counts(cls, v: Dict[str, int]) -> Dict[str, int]:
        for stage, count in v.items():
            if count < 0:
                raise ValueError(f"Negative empty count for stage '{stage}': {count}")
        return v

    @property
    def stages(self) -> List[str]:
        return list(self.empty_after_stage)

    @property
    def final_empty(self) -> int:
        """Empty documents after the last stage."""
        if not self.empty_after_stage:
            return 0
        return list(self.empty_after_stage.values())[-1]


class FilterResult(BaseModel):
    """
    Output of the empty-document filter.

    ``source_indices[i]`` is the original input position of ``corpus[i]``.
    """
    model_config = ConfigDict(frozen=True)

    corpus: Corpus
    removed_indices: Tuple[int, ...] = ()

    @property
    def source_indices(self) -> List[int]:
        return self.corpus.source_indices

    @property
    def num_removed(self) -> int:
        return len(self.removed_indices)

    def original_index(self, position: int) -> int:
        """Map a post-filter position back to the original document index."""
        return self.corpus[position].index
