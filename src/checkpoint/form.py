"""Form inspectors: inspectors configured declaratively, field by field.

Instead of hand-writing ``validate``, a form inspector is told which rules
apply to each field (``set_checks``) and which fields are required
(``set_requirements``). Fields that are children are handed to the child,
along with the part of the declarations addressed to it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from checkpoint.inspector import Inspector
from checkpoint.utils.merge import deep_merge

if TYPE_CHECKING:
    from checkpoint.config import CheckpointConfig
    from checkpoint.definition import FormDefinition
    from checkpoint.rules import RuleFactory

logger = logging.getLogger(__name__)


class FormInspector(Inspector):
    """Inspector driven by field -> rules and field -> required declarations.

    Example::

        form = FormInspector()
        form.add("person", FormInspector())
        form.set_checks({"email": ["email"], "person": {"name": ["alpha"]}})
        form.set_requirements({"email": True, "person": {"name": True}})
        form.run({"email": "user@example.com", "person": {"name": "Jane"}})

    A requirement of exactly ``False`` for a child stops any requirement
    declarations from being passed down to that child, leaving the child's
    own requirements as they are.
    """

    def __init__(self, factory: RuleFactory | None = None, config: CheckpointConfig | None = None):
        self.checks: dict[str, Any] = {}
        self.requirements: dict[str, Any] = {}
        super().__init__(factory, config)

    @classmethod
    def from_definition(
        cls,
        definition: FormDefinition,
        factory: RuleFactory | None = None,
        config: CheckpointConfig | None = None
    ) -> FormInspector:
        """Build a form inspector tree from a ``FormDefinition``."""
        form = cls(factory, config)

        for reference, child_definition in definition.children.items():
            form.add(reference, cls.from_definition(child_definition, factory, config))

        form.set_checks(definition.checks)
        form.set_requirements(definition.requirements)
        return form

    def set_checks(self, checks: Mapping[str, Any]) -> FormInspector:
        """Merge field -> rule list declarations into the existing ones."""
        self.checks = deep_merge(self.checks, checks)
        return self

    def set_requirements(self, requirements: Mapping[str, Any]) -> FormInspector:
        """Merge field -> required (bool or nested mapping) declarations."""
        self.requirements = deep_merge(self.requirements, requirements)
        return self

    def fields(self) -> list[str]:
        """Declared fields that are not children, checks first."""
        declared = dict.fromkeys([*self.checks, *self.requirements])
        return [field for field in declared if field not in self.children]

    def validate(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            data = {}

        for field in self.fields():
            value = data.get(field)
            checks = self.checks.get(field) or []

            if not self.requirements.get(field):
                self.check(field, value, checks, True)
            else:
                self.check(field, value, checks)

        for reference, child in self.children.items():
            if reference in self.requirements or reference in self.checks:
                self._propagate(reference, child)

            logger.debug(f"Validating child '{reference}'")
            child.run(data.get(reference) or {})

    def _propagate(self, reference: str, child: Inspector) -> None:
        if not isinstance(child, FormInspector):
            logger.warning(
                f"Child '{reference}' is not a form inspector; "
                "its checks and requirements were not passed down"
            )
            return

        if reference in self.requirements:
            requirements = self.requirements[reference]
            if requirements is False:
                return
            if isinstance(requirements, Mapping):
                child.set_requirements(requirements)

        if isinstance(self.checks.get(reference), Mapping):
            child.set_checks(self.checks[reference])
