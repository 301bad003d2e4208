# geometry/world.py
from typing import Iterable, Iterator, List, Optional
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An unordered collection of Hittable objects. The list holds shared
    references; the same object may live in several lists.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def extend(self, objects: Iterable[Hittable]):
        self.objects.extend(objects)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Shrinking the far bound to the closest hit so far selects the same
        # record as testing every object against ray_t and taking the min t.
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
