"""Pick a project with fzf or tv and open or switch to its tmux session via laio."""

__version__ = "0.1.0"