# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import click
import os
import uuid
import logging

logger = logging.getLogger(__name__)

# GitHub Actions workflow commands need %, \r and \n escaped
def escape_data(value):
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")

class StepOutput:
    """Output and failure channel of the pipeline step.

    Outputs are appended to the file named by ``GITHUB_OUTPUT`` when it is
    set, failures, warnings and debug lines are printed as workflow commands.
    Everything is also kept on the instance so callers can inspect what was
    published.
    """

    def __init__(self, output_file=None, echo=True):
        if output_file is None:
            output_file = os.environ.get("GITHUB_OUTPUT")
        self.output_file = output_file
        self.echo = echo
        self.outputs = {}
        self.failures = []
        self.warnings = []

    def _command(self, command, message):
        if self.echo:
            click.echo("::%s::%s"%(command, escape_data(message)))

    def set_output(self, name, value):
        self.outputs[name] = value
        logger.info("Output %s=%s"%(name, value))
        if self.output_file is None or len(self.output_file) <= 0:
            return
        value = str(value)
        with open(self.output_file, "a") as of:
            if "\n" in value:
                delimiter = "ghadelimiter_%s"%(uuid.uuid4())
                of.write("%s<<%s\n%s\n%s\n"%(name, delimiter, value, delimiter))
            else:
                of.write("%s=%s\n"%(name, value))

    def set_failed(self, message):
        self.failures.append(message)
        logger.error(message)
        self._command("error", message)

    def warning(self, message):
        self.warnings.append(message)
        logger.warning(message)
        self._command("warning", message)

    def info(self, message):
        logger.info(message)
        if self.echo:
            click.echo(message)

    def debug(self, message):
        logger.debug(message)
        self._command("debug", message)

    @property
    def failed(self):
        return len(self.failures) > 0
