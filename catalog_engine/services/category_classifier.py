"""Product category classifier using ordered keyword rules.

Categories are never stored on a product; they are derived from the
product name every time they are needed.

Strategy:
1. Lower-case the product name
2. Walk the rule table in order
3. First rule with any keyword contained in the name wins
4. No match → "Other"

The rule order is the tie-break: "Glass Door Display Merchandiser"
resolves to Merchandiser because that rule comes before Glass Door
and Display Case.

Example:
    classifier = CategoryClassifier()
    classifier.classify("True T-49 Reach In Refrigerator")
    # "Reach-In"
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, List

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_LABEL = "Other"


@dataclass(frozen=True)
class CategoryRule:
    """A classification rule: any keyword as a substring selects the label."""
    label: str
    keywords: Tuple[str, ...]

    def matches(self, name_lower: str) -> bool:
        return any(keyword in name_lower for keyword in self.keywords)


class CategoryClassifier:
    """Rule-based product category classifier.

    Pure and total: every string, including the empty string, maps to
    exactly one label, and results never depend on earlier calls.

    Attributes:
        rules: Ordered rule table, first match wins
        default_label: Label returned when no rule matches
    """

    DEFAULT_RULES: Tuple[CategoryRule, ...] = (
        CategoryRule("Reach-In", ("reach in",)),
        CategoryRule("Merchandiser", ("merchandiser", "merchandising")),
        CategoryRule("Prep Table", ("prep table", "sandwich")),
        CategoryRule("Bakery Case", ("bakery case",)),
        CategoryRule("Bar Cooler", ("bar cooler", "back bar")),
        CategoryRule("Undercounter", ("undercounter",)),
        CategoryRule("Chef Base", ("chef base",)),
        CategoryRule("Glass Door", ("glass door",)),
        CategoryRule("Display Case", ("display",)),
        CategoryRule("Upright", ("upright",)),
        CategoryRule("Worktop", ("worktop",)),
        CategoryRule("Buffet/Salad Bar", ("buffet", "salad bar")),
    )

    def __init__(
        self,
        rules: Optional[Sequence[CategoryRule]] = None,
        default_label: str = DEFAULT_LABEL,
    ):
        """Initialize classifier with rules.

        Args:
            rules: Custom ordered rule table (replaces the defaults)
            default_label: Catch-all label for unmatched names
        """
        self.rules: Tuple[CategoryRule, ...] = tuple(
            rules if rules is not None else self.DEFAULT_RULES
        )
        self.default_label = default_label
        self._log = logger.bind(component="CategoryClassifier")

    def classify(self, product_name: str) -> str:
        """Classify a product name into a category label.

        Args:
            product_name: Product name/title to classify

        Returns:
            Label of the first matching rule, or the default label
        """
        name_lower = product_name.lower()

        for rule in self.rules:
            if rule.matches(name_lower):
                return rule.label

        self._log.debug(
            "classified_as_default",
            product=product_name[:50],
            label=self.default_label,
        )
        return self.default_label

    def labels(self) -> List[str]:
        """Full label vocabulary in rule order, default label last."""
        labels: List[str] = []
        for rule in self.rules:
            if rule.label not in labels:
                labels.append(rule.label)
        if self.default_label not in labels:
            labels.append(self.default_label)
        return labels


_default_classifier = CategoryClassifier()


def classify(name: str) -> str:
    """Classify a product name with the default rule table."""
    return _default_classifier.classify(name)
