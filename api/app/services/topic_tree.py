"""
Topic tree - parent/child index over one snapshot of a user's topics.
"""
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set, Any

from app.models.models import Topic


class TopicTree:
    """
    Adjacency index built once from a list of topics.

    Children keep the order of the input list, so a snapshot sorted by
    number yields children sorted by number.
    """

    def __init__(self, topics: Iterable[Topic]):
        self._topics: List[Topic] = list(topics)
        self._by_id: Dict[int, Topic] = {t.id: t for t in self._topics}
        self._children: Dict[Optional[int], List[Topic]] = defaultdict(list)
        for topic in self._topics:
            parent_id = topic.parent_id if topic.parent_id in self._by_id else None
            self._children[parent_id].append(topic)

    def get(self, topic_id: int) -> Optional[Topic]:
        return self._by_id.get(topic_id)

    def roots(self) -> List[Topic]:
        return list(self._children[None])

    def children(self, topic_id: Optional[int]) -> List[Topic]:
        """Direct children of topic_id; None gives the roots."""
        return list(self._children.get(topic_id, []))

    def ancestors(self, topic_id: int) -> List[Topic]:
        """Breadcrumb from the root down to the parent of topic_id."""
        chain: List[Topic] = []
        seen: Set[int] = {topic_id}
        current = self._by_id.get(topic_id)
        while current is not None and current.parent_id is not None:
            if current.parent_id in seen:
                break
            seen.add(current.parent_id)
            parent = self._by_id.get(current.parent_id)
            if parent is None:
                break
            chain.append(parent)
            current = parent
        chain.reverse()
        return chain

    def descendant_ids(self, topic_id: int) -> Set[int]:
        """topic_id plus every topic below it."""
        result: Set[int] = set()
        stack = [topic_id]
        while stack:
            current = stack.pop()
            if current in result:
                continue
            result.add(current)
            stack.extend(child.id for child in self._children.get(current, []))
        return result

    def nested(self, card_counts: Optional[Dict[int, int]] = None) -> List[Dict[str, Any]]:
        """Roots with their subtrees, for the tree view."""
        card_counts = card_counts or {}

        def build(topic: Topic) -> Dict[str, Any]:
            return {
                "topic": topic,
                "card_count": card_counts.get(topic.id, 0),
                "children": [build(child) for child in self._children.get(topic.id, [])],
            }

        return [build(root) for root in self.roots()]
