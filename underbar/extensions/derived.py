from __future__ import annotations
from ..types import *
from .core import each, adapt, identity, property_of
from .set import MembershipLedger


def filter_(collection: Any, predicate: Predicate, context: Any = MISSING) -> List[Any]:
    """elements for which predicate(value, position, collection) is truthy"""
    test = adapt(predicate, context)
    results = []

    def keep(value, position, source):
        if test(value, position, source):
            results.append(value)

    each(collection, keep)
    return results


def reject(collection: Any, predicate: Predicate, context: Any = MISSING) -> List[Any]:
    """the complement of filter_"""
    test = adapt(predicate, context)
    return filter_(collection, lambda value, position, source: not test(value, position, source))


def uniq(sequence: Any) -> List[Any]:
    """drop repeated elements, keeping the first occurrence of each"""
    seen = MembershipLedger()
    results = []

    def visit(item):
        if item not in seen:
            seen.mark(item, 0)
            results.append(item)

    each(sequence, visit)
    return results


def map_(collection: Any, transform: Visitor, context: Any = MISSING) -> List[Any]:
    """transform(value, position, collection) for every element, in walk order"""
    apply = adapt(transform, context)
    results = []
    each(collection, lambda value, position, source: results.append(apply(value, position, source)))
    return results


def pluck(collection: Any, property_name: str) -> List[Any]:
    """the named field of every element; none where it is missing"""
    return map_(collection, property_of(property_name))


def invoke(collection: Any, method: Union[str, Callable, Invocation], *args: Any) -> List[Any]:
    """
    call a method on every element and collect the results.
    `method` is either a method name looked up on each element or a callable
    that receives the element followed by `args`.
    raises MissingMethodError when a named method does not exist on an element.
    """
    invocation = as_invocation(method)
    if invocation is None:
        return map_(collection, lambda item: None)
    return map_(collection, lambda item: invocation.call(item, args))


def reduce(collection: Any, combine: Combiner, initial: Any = MISSING, context: Any = MISSING) -> Any:
    """
    left fold: combine(accumulator, value, position, collection) for every element.
    the accumulator starts at `initial`, which is 0 when omitted or none.
    """
    if initial is MISSING or initial is None:
        initial = 0
    step = adapt(combine, context)
    accumulator = [initial]

    def fold(value, position, source):
        accumulator[0] = step(accumulator[0], value, position, source)

    each(collection, fold)
    return accumulator[0]


def contains(collection: Any, target: Any) -> bool:
    """whether any element equals target"""
    return reduce(collection, lambda found, item: found or bool(item == target), False)


def every(collection: Any, predicate: Optional[Predicate] = None, context: Any = MISSING) -> bool:
    """true when predicate holds for all elements (vacuously true when empty)"""
    test = adapt(predicate if predicate is not None else identity, context)
    return reduce(collection,
                  lambda match, value, position, source: bool(test(value, position, source)) and match,
                  True)


def some(collection: Any, predicate: Optional[Predicate] = None, context: Any = MISSING) -> bool:
    """true when predicate holds for at least one element; not every(not predicate)"""
    test = adapt(predicate if predicate is not None else identity, context)
    return not every(collection, lambda value, position, source: not test(value, position, source))
