"""Package metadata harvested from a single template file."""

from dataclasses import dataclass, field

from category_harvest.models.model_classification import FieldSelector


@dataclass(frozen=True)
class PackageRecord:
    """Normalized metadata for one package template.

    Built once per parse pass and never mutated afterwards. Only
    ``pkgname`` is required; absent text fields are ``None``.
    """

    pkgname: str
    short_desc: str | None = None
    homepage: str | None = None
    maintainer: str | None = None
    template_path: str = ""
    template_categories: tuple[str, ...] = field(default_factory=tuple)
    depends: tuple[str, ...] = field(default_factory=tuple)

    @property
    def lower_name(self) -> str:
        return self.pkgname.lower()

    def values_for(self, selector: FieldSelector) -> tuple[str, ...]:
        """Lower-cased values for a field selector.

        Scalar fields yield at most one value; missing fields yield none,
        so rules on them never match.
        """
        if selector is FieldSelector.NAME:
            return (self.lower_name,)
        if selector is FieldSelector.SHORT_DESC:
            return _optional(self.short_desc)
        if selector is FieldSelector.HOMEPAGE:
            return _optional(self.homepage)
        if selector is FieldSelector.MAINTAINER:
            return _optional(self.maintainer)
        if selector is FieldSelector.PATH:
            return (self.template_path.lower(),)
        if selector is FieldSelector.DEPENDS:
            return tuple(dep.lower() for dep in self.depends)
        if selector is FieldSelector.TEMPLATE_CATEGORY:
            return tuple(cat.lower() for cat in self.template_categories)
        raise ValueError(f"Unknown field selector: {selector}")


def _optional(value: str | None) -> tuple[str, ...]:
    return (value.lower(),) if value is not None else ()
