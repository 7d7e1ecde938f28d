"""
Project Path Checker MCP Server.

Checks that the project the server is started in lives in a suitable folder.
The server process is the check session: once the location has passed, later
checks are skipped until `force_recheck` is called.

Setup:
    claude mcp add --transport stdio project-path-checker -- uv run project-path-checker-mcp

Example:
    # Check the current project (skipped after a first success)
    check_project_path()

    # Check again even after a success
    force_recheck()
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncIterator
from pathlib import Path

import attrs
from mcp.server.fastmcp import Context, FastMCP

from project_path_checker.config.mcp import McpServerSettings, settings
from project_path_checker.mcp.utils import DualLogger
from project_path_checker.schemas.report import CheckReport
from project_path_checker.schemas.violations import SpecialFolders
from project_path_checker.services.environment import get_special_folders
from project_path_checker.services.messages import ViolationFormatter, detect_language, get_message_lookup
from project_path_checker.services.reporter import PathCheckReporter
from project_path_checker.services.session import CheckSession
from project_path_checker.services.simulation import get_current_project_path

# ==============================================================================
# Server State (immutable)
# ==============================================================================


@attrs.define(frozen=True)
class ServerState:
    """
    Immutable server state initialized at startup.

    The CheckSession inside is mutable on purpose: it is the only state
    that changes while the server runs.
    """

    project_dir: Path
    special_folders: SpecialFolders
    session: CheckSession
    formatter: ViolationFormatter
    settings: McpServerSettings

    def candidate_path(self) -> str:
        """Resolve the candidate path, applying the configured simulations."""
        return get_current_project_path(self.project_dir, self.special_folders, self.settings.simulation_options())

    def reporter(self, logger: DualLogger) -> PathCheckReporter:
        return PathCheckReporter(
            session=self.session,
            formatter=self.formatter,
            logger=logger,
            show_positive_messages=self.settings.SHOW_POSITIVE_MESSAGES,
            about=self.formatter.about(self.settings.APP_NAME, f'Version {self.settings.VERSION}'),
        )

    async def check(self, logger: DualLogger) -> CheckReport:
        return await self.reporter(logger).report(
            self.candidate_path(), self.special_folders, self.settings.MAX_PATH_LENGTH
        )


# ==============================================================================
# Lifespan Management
# ==============================================================================


@contextlib.asynccontextmanager
async def lifespan(mcp_server: FastMCP) -> AsyncIterator[None]:
    """
    Manage server lifecycle and state initialization.

    Creates ServerState at startup and runs the initial location check.
    """
    project_dir = Path.cwd().resolve()
    formatter = ViolationFormatter(get_message_lookup(detect_language(settings.LANGUAGE)))

    state = ServerState(
        project_dir=project_dir,
        special_folders=get_special_folders(),
        session=CheckSession(),
        formatter=formatter,
        settings=settings,
    )

    # Register tools with closure over state
    register_tools(state)

    logger = DualLogger()
    await logger.info(f'[MCP Server] Project: {project_dir}')

    if settings.CHECK_ON_STARTUP:
        report = await state.check(logger)
        if report.title:
            await logger.warning(report.title)

    yield  # Setup successful; application active


# ==============================================================================
# Server Setup
# ==============================================================================

server = FastMCP('project-path-checker', lifespan=lifespan)


# ==============================================================================
# Tool Registration (Closure Pattern)
# ==============================================================================


def register_tools(state: ServerState) -> None:
    """
    Register MCP tools with closure over server state.

    Args:
        state: Server state containing the check session
    """

    @server.tool()
    async def check_project_path(ctx: Context = None) -> CheckReport:
        """
        Check that the current project is stored in a suitable folder.

        Rules: path at most MAX_PATH_LENGTH (default 90) characters, no
        accented characters, not in a OneDrive/Dropbox/Google/iCloud folder,
        not in Documents or on the Desktop (Windows).

        Once a check has passed, later calls are skipped (status 'skipped')
        until force_recheck is called.

        Returns:
            CheckReport with status, violations and localized explanations
        """
        return await state.check(DualLogger(ctx))

    @server.tool()
    async def force_recheck(ctx: Context = None) -> CheckReport:
        """
        Forget any previous success and check the project location again.

        Returns:
            CheckReport with status 'passed' or 'failed'
        """
        state.session.force_reset()
        return await state.check(DualLogger(ctx))

    @server.tool()
    async def clear_warnings(ctx: Context = None) -> int:
        """
        Drop the warnings held from the last failed check.

        The success flag is kept, so this does not trigger a new check.

        Returns:
            Number of warnings cleared
        """
        cleared = state.session.clear_violations()
        await DualLogger(ctx).info(f'Cleared {cleared} warning(s)')
        return cleared


# ==============================================================================
# Server Entry Point
# ==============================================================================


def main() -> None:
    """Run the MCP server."""
    server.run()


if __name__ == '__main__':
    main()
