"""Pipeline wiring: evaluate the library, classify it, export the binding."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from .binding import Binding
from .classifier import Classifier
from .config import JsbindConfig
from .engine import ScriptEngine, create_engine
from .extract import SignatureExtractor, build_extractor
from .logging import get_logger


class Generator:
    """Runs one generation from library source to a written Go file."""

    def __init__(
        self,
        config: JsbindConfig,
        *,
        engine_factory: Callable[[], ScriptEngine] = create_engine,
        extractor: Optional[SignatureExtractor] = None,
    ) -> None:
        self.config = config
        self._engine_factory = engine_factory
        self._extractor = extractor
        self.logger = get_logger("generator")

    def build(self) -> Binding:
        """Evaluate the input and return the populated binding without writing it."""
        config = self.config
        input_path, object_name, package = config.validate()

        extractor = self._extractor or build_extractor(config.extractor)
        self.logger.debug("Using %s signature extractor", extractor.name)

        engine = self._engine_factory()
        try:
            engine.bootstrap(config.prelude)
            self.logger.info("Evaluating %s", input_path)
            engine.run_file(input_path)
            ref = engine.lookup(object_name)

            binding = Binding(
                package,
                runtime_import=config.runtime_import,
                templates_dir=config.templates_dir,
            )
            classifier = Classifier(
                binding, engine, extractor, guard_cycles=config.guard_cycles
            )
            classifier.classify(package, ref)
        finally:
            engine.close()

        self.logger.info(
            "Discovered %d elements under %s", len(binding), object_name
        )
        return binding

    def run(self) -> Path:
        binding = self.build()
        output_path = self.config.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return binding.export(output_path)


__all__ = ["Generator"]
