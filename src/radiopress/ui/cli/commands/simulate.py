"""src/radiopress/ui/cli/commands/simulate.py
What: Replay a playback session against a headless media element.
Why: Check shuffle, repeat, filter, and error-skip behaviour without a browser.
"""

from typing import final, override

from radiopress.platform.logging import logger
from radiopress.ui.cli.args.options import SimulateArgs
from radiopress.ui.cli.commands.executor import CatalogCommandExecutor
from radiopress.ui.cli.display.simulation import SimulationDisplay


@final
class SimulateCommand(CatalogCommandExecutor):
    """Drive a session for a fixed number of track attempts."""

    args: SimulateArgs

    @override
    def execute(self) -> None:
        catalog = self.load_catalog()
        known = {track.filename for track in catalog}
        for filename in self.args.fail:
            if filename not in known:
                logger.warning("--fail %s does not match any catalog file", filename)

        report = self.app.simulate(
            catalog,
            self.session_request(self.args),
            steps=self.args.steps,
            fail=self.args.fail,
            store=self.build_store(self.args.state_file),
        )
        SimulationDisplay(self.console).show(report, quiet=self.args.quiet)
