"""
Validator for orchestrating rules over a map of named input values.

A Validator holds an attribute schema and a rule map, applies the rules
attribute by attribute, and produces an ErrorCollection plus the
ValidatedInput of the values that passed.
"""

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any, ClassVar

from ..config import ValidatorSettings, load_settings
from ..errors import ConfigurationError, InputGuardError, RuleExecutionError, UnknownCapabilityError
from ..observability.logger import get_logger, log_operation
from ..observability.metrics import MetricsCollector
from .groups import GroupStep, resolve_group_steps
from .models import RuleResult
from .rules import RuleNode, RuleRegistry, compose, to_node
from .support import ErrorCollection, ValidatedInput

logger = get_logger(__name__)

Capability = Callable[..., Any]


class RunState(str, Enum):
    """Lifecycle of the most recent validation run."""

    IDLE = "idle"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


def normalize_attributes(attributes: Mapping[str, Any] | Iterable[Any]) -> dict[str, Any]:
    """
    Normalize an attribute declaration into a name -> default mapping.

    Accepts a mapping, or a list whose items are attribute names (default
    None) or mappings of names to defaults:

        ["email", "password", {"remember_me": True}]

    Raises:
        ConfigurationError: If an item is neither a name nor a mapping
    """
    if isinstance(attributes, Mapping):
        return dict(attributes)

    normalized: dict[str, Any] = {}
    for item in attributes:
        if isinstance(item, str):
            normalized[item] = None
        elif isinstance(item, Mapping):
            normalized.update(item)
        else:
            raise ConfigurationError(
                f"Attributes must be names or name/default mappings, got {type(item).__name__}"
            )
    return normalized


class Validator:
    """
    Validates user input against per-attribute rules.

    Rules are given per attribute as a single rule, a list of rules (all
    must pass) or a Sequential group (stops at the first failure). Rules
    may also be referenced by name through the validator's RuleRegistry.

    Subclasses can declare the schema declaratively:

        class LoginValidator(Validator):
            attributes = ["email", "password", {"remember_me": True}]

            def rules(self):
                return {
                    "email": [RequiredFieldValidator(), EmailValidator()],
                    "password": LengthValidator({"min": 8}),
                }
    """

    # Expected attributes and their defaults (see normalize_attributes)
    attributes: ClassVar[Mapping[str, Any] | Iterable[Any] | None] = None

    def __init__(
        self,
        rules: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | Iterable[Any] | None = None,
        *,
        registry: RuleRegistry | None = None,
        capabilities: Mapping[str, Capability] | None = None,
        settings: ValidatorSettings | None = None,
        metrics: MetricsCollector | None = None,
    ):
        """
        Initialize the validator.

        Args:
            rules: Mapping of attribute name to rule specification
            attributes: Expected attributes; inferred from the rules if omitted
            registry: Registry for rules referenced by name
            capabilities: Extra operations callable through call()
            settings: Validator settings (loaded from the environment if omitted)
            metrics: Metrics collector (built from settings if omitted)
        """
        self.settings = settings if settings is not None else load_settings()
        self.registry = registry if registry is not None else RuleRegistry()
        self.metrics = metrics if metrics is not None else MetricsCollector(self.settings.metrics_enabled)

        self._base_rules: dict[str, Any] = dict(rules or {})
        self._injected: list[tuple[str, Any]] = []
        self._capabilities: dict[str, Capability] = {}
        for name, capability in (capabilities or {}).items():
            self.register(name, capability)

        declared = attributes if attributes is not None else type(self).attributes
        if declared:
            self._attributes = normalize_attributes(declared)
        else:
            self._attributes = dict.fromkeys([*self.rules(), *self._base_rules])

        self._data: dict[str, Any] = {}
        self._stop_on_first_failure = self.settings.stop_on_first_failure
        self._errors = ErrorCollection()
        self._validated = ValidatedInput()
        self.state = RunState.IDLE

    @classmethod
    def make(
        cls,
        input: Mapping[str, Any],
        rules: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | Iterable[Any] | None = None,
        **kwargs: Any,
    ) -> "Validator":
        """
        Build a validator and set the data to validate.

        Args:
            input: Data to be validated
            rules: Mapping of attribute name to rule specification
            attributes: Expected attributes
            **kwargs: Passed through to the constructor

        Returns:
            Validator ready for validate()
        """
        validator = cls(rules, attributes, **kwargs)
        validator.set_data(input)
        return validator

    # =======================
    # SCHEMA
    # =======================

    def rules(self) -> Mapping[str, Any]:
        """
        Define the validation rules.

        Subclasses override this to declare their rules; the default returns
        the rules given to the constructor. Called once at construction and
        again at the start of every validation run.
        """
        return self._base_rules

    def add_rule(self, attribute: str, rules: Any) -> "Validator":
        """
        Add rules to an attribute.

        The new rules are merged into whatever the attribute already holds
        (see compose()). Unknown attributes are added with a None default.

        Args:
            attribute: Attribute name
            rules: A rule, a list of rules, or a Sequential group

        Returns:
            self, for chaining
        """
        self._injected.append((attribute, rules))
        if attribute not in self._attributes:
            self._attributes[attribute] = None
        return self

    def rule_map(self) -> dict[str, RuleNode]:
        """
        Compose the rule map a validation run would use.

        The rules() definition comes first. When a subclass overrides rules(),
        the constructor rules are merged on top of it; rules added through
        add_rule() follow in the order they were added.
        """
        nodes = {attribute: to_node(spec) for attribute, spec in self.rules().items()}
        instance_rules = list(self._base_rules.items()) if self._overrides_rules() else []
        for attribute, rules in [*instance_rules, *self._injected]:
            nodes[attribute] = compose(nodes.get(attribute), rules)
        return nodes

    def _overrides_rules(self) -> bool:
        return type(self).rules is not Validator.rules

    def stop_on_first_failure(self) -> "Validator":
        """Stop validating further attributes once one attribute has failed."""
        self._stop_on_first_failure = True
        return self

    # =======================
    # INPUT
    # =======================

    def set_data(self, input: Mapping[str, Any]) -> "Validator":
        """
        Set the input to validate.

        Attributes missing from the input fall back to their defaults.
        """
        self._data = dict(input)
        return self

    def all(self) -> dict[str, Any]:
        """Get all the unvalidated input values, one per expected attribute."""
        return {attribute: self._value_of(attribute) for attribute in self._attributes}

    def _value_of(self, attribute: str) -> Any:
        if attribute in self._data:
            return self._data[attribute]
        return self._attributes.get(attribute)

    # =======================
    # VALIDATION
    # =======================

    def validate(self, group: Any = None) -> bool:
        """
        Validate the input.

        Args:
            group: Validation group(s) to apply: a name, a list of names or a
                   GroupSequence. Defaults to the default group.

        Returns:
            True if the input is valid, False otherwise

        Raises:
            ConfigurationError: If the group or a rule node is malformed
            UnknownRuleError: If a rule name is not registered
            RuleExecutionError: If a rule raised while evaluating a value
        """
        steps = resolve_group_steps(group)
        rule_map = {
            attribute: node.resolve(self.registry.get)
            for attribute, node in self.rule_map().items()
        }
        for attribute in rule_map:
            self._attributes.setdefault(attribute, None)

        self._errors = ErrorCollection()
        self._validated = ValidatedInput()
        self.state = RunState.RUNNING

        attribute = None
        with log_operation("validate", logger=logger, attribute_count=len(self._attributes)) as operation:
            try:
                for attribute in self._attributes:
                    value = self._value_of(attribute)
                    node = rule_map.get(attribute)

                    result = RuleResult.success() if node is None else self._check(node, value, steps)

                    if result.ok:
                        self._validated.add(attribute, value)
                        continue

                    self._errors.add(attribute, result.message)
                    self.metrics.record_failure(attribute)
                    logger.debug(f"Attribute '{attribute}' failed: {result.message}")

                    if self._stop_on_first_failure:
                        break

            except RuleExecutionError as e:
                self._abort()
                if e.attribute is None:
                    e.attribute = attribute
                self.metrics.record_rule_error(getattr(e.rule, "rule_type", "unknown"))
                raise
            except InputGuardError:
                self._abort()
                raise

        passed = self._errors.is_empty()
        self.state = RunState.PASSED if passed else RunState.FAILED
        self.metrics.record_run(passed, operation.elapsed)
        return passed

    def _abort(self) -> None:
        # An aborted run leaves no partial outcome for passes()/fails() to reuse
        self._errors = ErrorCollection()
        self._validated = ValidatedInput()
        self.state = RunState.IDLE

    def _check(self, node: RuleNode, value: Any, steps: list[GroupStep]) -> RuleResult:
        # A failing group step suppresses the later steps of a GroupSequence.
        # Untagged rules take part in every step, so they run once per step.
        for step in steps:
            result = node.check(value, step)
            if not result.ok:
                return result
        return RuleResult.success()

    def passes(self, group: Any = None) -> bool:
        """
        Check the input is valid.

        Once a run has validated at least one attribute, its outcome is
        reused rather than validating again; call validate() to force a
        fresh run after changing rules or input.
        """
        if self._validated.is_empty():
            return self.validate(group)
        return self._errors.is_empty()

    def fails(self, group: Any = None) -> bool:
        """
        Check the input is invalid.

        Reuses the previous outcome the same way passes() does.
        """
        if self._validated.is_empty():
            return not self.validate(group)
        return not self._errors.is_empty()

    # =======================
    # RESULTS
    # =======================

    def errors(self) -> ErrorCollection:
        """Get the errors of the latest run."""
        return self._errors

    def validated(self, attribute: str | None = None) -> Any:
        """
        Retrieve validated input.

        Args:
            attribute: If given, return only this attribute's value

        Returns:
            The attribute's value (None if it did not pass), or all validated values
        """
        if attribute:
            return self._validated.get(attribute)
        return self._validated.all()

    def safe(self) -> ValidatedInput:
        """Get the validated input collection."""
        return self._validated

    # =======================
    # CAPABILITIES
    # =======================

    def register(self, name: str, capability: Capability) -> None:
        """
        Add an operation callable through call().

        The capability receives the validator as its first argument.

        Raises:
            ConfigurationError: If capability is not callable
        """
        if not callable(capability):
            raise ConfigurationError(f"Capability '{name}' must be callable")
        self._capabilities[name] = capability

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Call an operation added at construction or through register().

        Raises:
            UnknownCapabilityError: If no capability has that name
        """
        capability = self._capabilities.get(name)
        if capability is None:
            raise UnknownCapabilityError(name)
        return capability(self, *args, **kwargs)

    def has_capability(self, name: str) -> bool:
        """Whether a capability with this name can be called."""
        return name in self._capabilities
