"""
Сверка набора атрибутов товара.

По текущим и присланным парам (attribute_id, value) вычисляет,
какие значения добавить, какие перезаписать и какие удалить.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

Assignment = Tuple[int, str]


@dataclass(frozen=True)
class AttributeDiff:
    """
    Результат сверки атрибутов.

    Attributes:
        to_add: Новые пары, атрибута еще нет у товара
        to_update: Пары для перезаписи значения (даже если оно не изменилось)
        to_remove: ID атрибутов, которых нет в присланном наборе
        previous: Текущие значения по ID атрибута
    """

    to_add: List[Assignment] = field(default_factory=list)
    to_update: List[Assignment] = field(default_factory=list)
    to_remove: List[int] = field(default_factory=list)
    previous: Dict[int, str] = field(default_factory=dict)

    @property
    def changed(self) -> List[Assignment]:
        """Перезаписи, у которых значение действительно отличается."""
        return [(a, v) for a, v in self.to_update if self.previous.get(a) != v]

    @property
    def is_empty(self) -> bool:
        return not (self.to_add or self.to_remove or self.changed)


def dedupe_assignments(assignments: Iterable[Assignment]) -> List[Assignment]:
    """
    Убрать повторы по attribute_id.

    Побеждает последнее значение, позиция остается от первого вхождения.
    """
    merged: Dict[int, str] = {}
    for attribute_id, value in assignments:
        merged[attribute_id] = value
    return list(merged.items())


def reconcile_attributes(
    current: Iterable[Assignment], submitted: Iterable[Assignment]
) -> AttributeDiff:
    """
    Сверить текущие значения атрибутов товара с присланными.

    Args:
        current: Текущие пары (attribute_id, value)
        submitted: Присланные пары (attribute_id, value)

    Returns:
        AttributeDiff: Три непересекающихся по attribute_id списка действий

    Example:
        >>> diff = reconcile_attributes([(1, "L"), (2, "Blue")], [(2, "Red"), (3, "Heavy")])
        >>> diff.to_add, diff.to_update, diff.to_remove
        ([(3, 'Heavy')], [(2, 'Red')], [1])
    """
    previous = dict(current)
    wanted = dedupe_assignments(submitted)
    wanted_ids = {attribute_id for attribute_id, _ in wanted}

    to_add: List[Assignment] = []
    to_update: List[Assignment] = []
    for attribute_id, value in wanted:
        if attribute_id in previous:
            to_update.append((attribute_id, value))
        else:
            to_add.append((attribute_id, value))

    to_remove = [a for a in previous if a not in wanted_ids]

    return AttributeDiff(
        to_add=to_add, to_update=to_update, to_remove=to_remove, previous=previous
    )
