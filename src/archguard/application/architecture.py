"""
HexagonalArchitecture: the aggregate root of a hexagonal declaration.

Built once through the DSL (archguard.application.dsl), then verified
against a class graph. Verification order is fixed and part of the
contract, so violation messages come out in a stable order:

1. adapters layer
2. application layer
3. domain layer
4. custom rules, in registration order
"""

import logging
from dataclasses import dataclass

from archguard.application.layers import Adapters, ApplicationLayer, ArchitectureElement
from archguard.domain.interfaces import ClassGraphInterface, ValidationRule
from archguard.domain.models import SUCCESS, ValidationResult, combine_all

logger = logging.getLogger("archguard.architecture")


@dataclass(frozen=True)
class HexagonalArchitecture(ArchitectureElement):
    """
    Hexagonal architecture model.

    Attributes:
        base_package: Root package every layer is qualified against
        domain_packages: Fully qualified domain packages (0..n)
        adapters: Adapters layer, if declared
        application_layer: Application layer, if declared
        configuration_package: Configuration package, if declared
        custom_rules: Additional rules run after the layer checks
    """

    domain_packages: tuple[str, ...] = ()
    adapters: Adapters | None = None
    application_layer: ApplicationLayer | None = None
    configuration_package: str | None = None
    custom_rules: tuple[ValidationRule, ...] = ()

    def validate(self, graph: ClassGraphInterface) -> ValidationResult:
        """
        Run every architecture check and collect all violations.

        A failing check never stops the run; the returned Failure holds
        the violations of every check in verification order.
        """
        logger.info("Verifying hexagonal architecture of %s", self.base_package)
        results = [
            self._verify_adapters_layer(graph),
            self._verify_application_layer(graph),
            self._verify_domain_layer(graph),
            self._verify_custom_rules(graph),
        ]
        result = combine_all(results)
        if result.is_failure:
            logger.info(
                "%s: %d architecture violations",
                self.base_package,
                len(result.violations),
            )
        else:
            logger.info("%s: architecture rules hold", self.base_package)
        return result

    def check(self, graph: ClassGraphInterface) -> None:
        """
        Verify the architecture and raise on any violation.

        Raises:
            ArchitectureViolation: One consolidated report listing every
                violation found
        """
        self.validate(graph).raise_for_failure(
            f"hexagonal architecture of {self.base_package}"
        )

    def _verify_adapters_layer(self, graph: ClassGraphInterface) -> ValidationResult:
        adapters = self.adapters
        if adapters is None:
            logger.debug("No adapters layer declared, skipping adapter checks")
            return SUCCESS

        results = [
            adapters.verify_no_empty_packages(graph),
            adapters.verify_no_cross_adapter_dependencies(graph),
        ]
        if self.configuration_package is not None:
            results.append(
                adapters.verify_no_dependency_on(self.configuration_package, graph)
            )
        return combine_all(results)

    def _verify_application_layer(
        self, graph: ClassGraphInterface
    ) -> ValidationResult:
        application = self.application_layer
        if application is None:
            logger.debug("No application layer declared, skipping application checks")
            return SUCCESS

        results = [application.verify_no_empty_packages(graph)]
        if self.adapters is not None:
            results.append(
                application.verify_no_dependency_on(self.adapters.base_package, graph)
            )
        if self.configuration_package is not None:
            results.append(
                application.verify_no_dependency_on(self.configuration_package, graph)
            )
        results.append(application.verify_ports_do_not_depend_on_each_other(graph))
        return combine_all(results)

    def _verify_domain_layer(self, graph: ClassGraphInterface) -> ValidationResult:
        # Each target layer is checked only when declared
        targets: list[str] = []
        if self.adapters is not None:
            targets.append(self.adapters.base_package)
        if self.application_layer is not None:
            targets.append(self.application_layer.base_package)
        if self.configuration_package is not None:
            targets.append(self.configuration_package)

        return combine_all(
            self.deny_any_dependency(self.domain_packages, [target], graph)
            for target in targets
        )

    def _verify_custom_rules(self, graph: ClassGraphInterface) -> ValidationResult:
        return combine_all(rule.validate(graph) for rule in self.custom_rules)
