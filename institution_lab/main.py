"""
Institution lab entry point.

Builds the literal institution collection, prints it, sorts it by enrollment
(ascending) then rating (descending), prints it again and searches it for an
identical institution and for one that was never added. Command-line arguments
are ignored; settings come from the optional JSON file named by
``LAB_CONFIG_FILE`` and from ``LAB_*`` environment variables.
"""

import sys
from typing import Optional, TextIO

from institution_lab.application.services.dataset import (
    build_institutions, build_search_target, build_absent_institution
)
from institution_lab.application.services.lab_pipeline import LabPipeline
from institution_lab.domain.exceptions import InstitutionLabError
from institution_lab.infrastructure.configuration.manager import ConfigurationManager
from institution_lab.infrastructure.error_handling.handler import ErrorHandler
from institution_lab.infrastructure.logging.logger import LoggerFactory
from institution_lab.infrastructure.reporting.console import ConsoleReporter


def main(stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Run the lab once. Returns the process exit status."""
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    logger = LoggerFactory.create_logger(stream=stderr)
    error_handler = ErrorHandler(logger)

    try:
        config = ConfigurationManager.from_environment(logger).get_lab_config()

        logger = LoggerFactory.from_configuration(config, stream=stderr)
        error_handler = ErrorHandler(logger)

        pipeline = LabPipeline(ConsoleReporter(stdout), logger, sort_in_place=config.sort_in_place)
        pipeline.run(build_institutions(), build_search_target(), build_absent_institution())
    except InstitutionLabError as e:
        stderr.write(error_handler.handle_error(e, {'component': 'main'}) + "\n")
        return 1
    finally:
        logger.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
