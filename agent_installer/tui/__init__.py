from agent_installer.tui.renderers import InstallerConsoleUI

__all__ = ["InstallerConsoleUI"]
