from __future__ import annotations

from abc import ABC, abstractmethod

from widget.contracts import Severity, StyleDescriptor

SEVERITY_CLASSES = {
    Severity.SUCCESS: ('bg-green-100', 'border-green-400', 'text-green-700'),
    Severity.ERROR: ('bg-red-100', 'border-red-400', 'text-red-700'),
    Severity.WARNING: ('bg-yellow-100', 'border-yellow-400', 'text-yellow-700'),
    Severity.INFO: ('bg-blue-100', 'border-blue-400', 'text-blue-700'),
}
PANEL_TEXT_CLASSES = {
    Severity.ERROR: ('text-red-600', 'text-red-500'),
    Severity.WARNING: ('text-yellow-600', 'text-yellow-500'),
}


class StyleStrategy(ABC):
    name: str

    @abstractmethod
    def banner_style(self, severity: Severity | str) -> StyleDescriptor:
        pass  # pragma: no cover

    def panel_text(self, severity: Severity) -> tuple[str, str]:
        """Heading and detail classes for a notice panel."""
        return PANEL_TEXT_CLASSES.get(severity, ('text-gray-600', 'text-gray-500'))

    @staticmethod
    def _normalize(severity: Severity | str) -> Severity:
        try:
            return Severity(severity)
        except ValueError:
            return Severity.INFO


class ClassListStyle(StyleStrategy):
    """Strips every severity class from the box, then adds the current set."""

    name = 'class_list'

    def __init__(
        self, base_classes: tuple[str, ...] = ('mt-4', 'p-3', 'border', 'rounded-lg')
    ) -> None:
        self._classes = list(base_classes)

    def banner_style(self, severity: Severity | str) -> StyleDescriptor:
        known = {cls for group in SEVERITY_CLASSES.values() for cls in group}
        classes = [cls for cls in self._classes if cls not in known]
        classes.extend(SEVERITY_CLASSES[self._normalize(severity)])
        self._classes = classes
        return StyleDescriptor(class_name=' '.join(classes))


class ClassNameStyle(StyleStrategy):
    """Rebuilds the box class from a fixed template on every call."""

    name = 'class_name'
    template = 'mt-4 p-3 border rounded-lg'

    def banner_style(self, severity: Severity | str) -> StyleDescriptor:
        classes = ' '.join(SEVERITY_CLASSES[self._normalize(severity)])
        return StyleDescriptor(class_name=f"{self.template} {classes}")


STYLES: dict[str, type[StyleStrategy]] = {
    ClassListStyle.name: ClassListStyle,
    ClassNameStyle.name: ClassNameStyle,
}


def get_style(name: str) -> StyleStrategy:
    try:
        return STYLES[name]()
    except KeyError:
        raise ValueError(f"Unknown style strategy: {name}") from None
