"""Relevance scoring for site search.

Scores are additive. Each factor that fires adds its configured weight
(see :class:`~site_search.config.settings.ScoringWeights`):

- title contains the query, and again if the title equals it
- description contains the query
- per keyword, an exact or a partial match
- fuzzy multi-term bonus proportional to the fraction of query terms
  found in any field
- items whose url carries a ``#fragment``

The fragment boost is applied whether or not any text matched, so an
anchor entry that only earned a small fuzzy bonus still outranks a page
with the same text score.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from ..catalog.models import SearchItem
from ..config.settings import SearchConfig
from .query_processor import ProcessedQuery


@dataclass
class RelevanceScore:
    """Represents a relevance score with breakdown."""

    total_score: float
    factor_scores: Dict[str, float]
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ScoredItem:
    """A catalog item paired with its score for one query."""

    item: SearchItem
    score: float


class RelevanceRanker:
    """Computes additive relevance scores for catalog items."""

    def __init__(self, config: SearchConfig):
        """Initialize the relevance ranker.

        Args:
            config: Search configuration with scoring weights
        """
        self.config = config
        self.weights = config.weights

    def calculate_relevance_score(
        self,
        query: ProcessedQuery,
        item: SearchItem,
        fuzzy_match: bool = True,
        boost_exact_matches: bool = True,
    ) -> RelevanceScore:
        """Calculate the relevance score of one item.

        Args:
            query: Normalized query
            item: Catalog item to score
            fuzzy_match: Whether to add the multi-term fuzzy bonus
            boost_exact_matches: Whether an exact title match earns extra

        Returns:
            RelevanceScore: Total score and per-factor contributions
        """
        weights = self.weights
        needle = query.normalized_query
        title = item.title.lower()
        description = item.description.lower()
        keywords = [keyword.lower() for keyword in item.keywords]

        factor_scores: Dict[str, float] = {}

        if needle and needle in title:
            factor_scores["title_match"] = weights.title_match
            if boost_exact_matches and title == needle:
                factor_scores["exact_title"] = weights.exact_title

        if needle and needle in description:
            factor_scores["description_match"] = weights.description_match

        if needle:
            exact = sum(1 for keyword in keywords if keyword == needle)
            partial = sum(
                1 for keyword in keywords if keyword != needle and needle in keyword
            )
            if exact:
                factor_scores["keyword_exact"] = exact * weights.keyword_exact
            if partial:
                factor_scores["keyword_partial"] = partial * weights.keyword_partial

        matched_terms: List[str] = []
        if fuzzy_match and query.is_multi_term:
            matched_terms = [
                term
                for term in query.fuzzy_terms
                if term in title
                or term in description
                or any(term in keyword for keyword in keywords)
            ]
            if matched_terms:
                # Short terms are skipped but still count in the denominator
                fraction = len(matched_terms) / len(query.terms)
                factor_scores["fuzzy_terms"] = fraction * weights.fuzzy_terms

        if item.has_fragment:
            factor_scores["fragment_url"] = weights.fragment_url

        return RelevanceScore(
            total_score=sum(factor_scores.values()),
            factor_scores=factor_scores,
            metadata={
                "query_term_count": len(query.terms),
                "matched_terms": matched_terms,
                "matched_factors": list(factor_scores),
            },
        )

    def score_items(
        self,
        query: ProcessedQuery,
        items: Sequence[SearchItem],
        fuzzy_match: bool = True,
        boost_exact_matches: bool = True,
    ) -> List[ScoredItem]:
        """Score every item, keeping catalog order.

        Args:
            query: Normalized query
            items: Catalog items in catalog order
            fuzzy_match: Whether to add the multi-term fuzzy bonus
            boost_exact_matches: Whether an exact title match earns extra

        Returns:
            List of scored items, one per input item, in input order
        """
        return [
            ScoredItem(
                item=item,
                score=self.calculate_relevance_score(
                    query, item, fuzzy_match, boost_exact_matches
                ).total_score,
            )
            for item in items
        ]

    def explain_score(
        self,
        query: ProcessedQuery,
        item: SearchItem,
        fuzzy_match: bool = True,
        boost_exact_matches: bool = True,
    ) -> Dict[str, Any]:
        """Provide a readable explanation of how a score was calculated.

        Args:
            query: Normalized query
            item: Catalog item to explain

        Returns:
            Dict[str, Any]: Final score, factor contributions and steps
        """
        relevance_score = self.calculate_relevance_score(
            query, item, fuzzy_match, boost_exact_matches
        )

        steps: List[Tuple[str, float]] = sorted(
            relevance_score.factor_scores.items(), key=lambda x: x[1], reverse=True
        )

        return {
            "url": item.url,
            "final_score": relevance_score.total_score,
            "query": query.normalized_query,
            "factor_contributions": dict(relevance_score.factor_scores),
            "matched_terms": relevance_score.metadata["matched_terms"],
            "calculation_steps": [f"{name}: +{value:.3f}" for name, value in steps],
        }
