"""Editor core: syntax rules, tabs, search, project boards, a file tree, a shell panel and session state."""

__version__ = "0.1.0"