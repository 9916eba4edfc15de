import logging
import uuid
from typing import Iterator, List, Optional

from core.registry import Catalog
from core.types import ModuleInstance

logger = logging.getLogger(__name__)


class InstanceStore:
    """Ordered, append-only list of the module instances placed in one document.

    Mutated only through add/remove/set_repeat/set_data; ids are unique for the
    lifetime of the store.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._items: List[ModuleInstance] = []
        self._issued: set = set()

    def _new_id(self) -> str:
        while True:
            i = uuid.uuid4().hex[:8]
            if i not in self._issued:
                self._issued.add(i)
                return i

    def add(self, tag: str) -> Optional[ModuleInstance]:
        meta = self.catalog.get(tag)
        if meta is None:
            logger.warning("Ignoring add of unknown module type %r", tag)
            return None
        inst = ModuleInstance(
            id=self._new_id(),
            tag=meta.tag,
            title=meta.label,
            repeat_count=1 if meta.repeatable else None,
            data={},
        )
        self._items.append(inst)
        logger.debug("Added %s (%s)", inst.tag, inst.id)
        return inst

    def remove(self, instance_id: str) -> bool:
        before = len(self._items)
        self._items = [x for x in self._items if x.id != instance_id]
        return len(self._items) != before

    def set_repeat(self, instance_id: str, delta: int) -> Optional[int]:
        inst = self.get(instance_id)
        if inst is None:
            return None
        meta = self.catalog.get(inst.tag)
        if meta is None or not meta.repeatable:
            return None
        inst.repeat_count = max(1, (inst.repeat_count or 1) + delta)
        return inst.repeat_count

    def set_data(self, instance_id: str, key: str, value: str) -> bool:
        inst = self.get(instance_id)
        if inst is None:
            return False
        meta = self.catalog.get(inst.tag)
        if meta is None or key not in dict(meta.fields):
            return False
        inst.data[key] = value
        return True

    def get(self, instance_id: str) -> Optional[ModuleInstance]:
        for x in self._items:
            if x.id == instance_id:
                return x
        return None

    @property
    def instances(self) -> List[ModuleInstance]:
        return list(self._items)

    def clear(self) -> None:
        self._items = []

    def __iter__(self) -> Iterator[ModuleInstance]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
