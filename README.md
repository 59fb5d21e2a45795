# projswitch

A terminal project switcher. It scans your projects directory for git
repositories and ranks them by how often you open them. You pick one with
`fzf` or `tv`. The picked project opens in a tmux session started with
`laio`. If the session is already running, you switch to it when you are
inside tmux. Otherwise you attach to it.

## Install

```
pip install .
```

You also need these programs on your `PATH`:

- `tmux`
- `laio`
- `fzf` or `tv`
- `glow` or `bat`, for the README preview
- `ls`, for the directory listing preview

For the tests:

```
pip install .[test]
pytest
```

## Usage

```
project            # pick a project and open its session
project rust       # start the picker with the query "rust"
project -e         # pick a project and edit its laio session config
project --edit api
```

The flags `-e` and `--edit` can appear anywhere on the command line. The
last other argument becomes the initial query.

### Finding projects

Projects are found at two levels under the projects directory:

- A repository in a category directory: `~/Projects/<category>/<repo>`.
- A repository in a group directory inside a category:
  `~/Projects/<category>/<group>/<repo>`. A project found this way is shown
  as `group/repo`.

A directory counts as a repository when it holds a `.git` directory.

### Ordering

Projects with a running tmux session come first. A separator line divides
them from the rest. Within each part, projects are ordered by how often they
were opened, then by name, ignoring case.

Each line shows the category's initial in a colour picked for that category.

### Session names

A project's session name is its display name with two substitutions: `/`
becomes `-`, and `.` becomes `--`.

### Opening a project

Every time you open a project, the use is recorded. If no session with that
name exists, one is started with `laio start --file <config> --skip-attach`.
tmux then selects the `shell` window and then the `code` window.

### The preview pane

The preview pane shows the following:

- For a running session, the session's windows, with the active one marked.
- The tech stack detected from marker files, such as `Cargo.toml`,
  `package.json`, `go.mod` and `Dockerfile`.
- The first of `README.md`, `readme.md` or `README`, rendered with glow or
  bat.
- If there is no README, a directory listing.

The pickers run the preview through the hidden argument `__preview`. Its
width comes from `FZF_PREVIEW_COLUMNS`, else from `COLUMNS`, else it is 80.
The width is never more than 100.

## Configuration

All settings come from environment variables. `HOME` must be set.

| Variable | Default | Meaning |
| --- | --- | --- |
| `PROJECT_DIR` | `$HOME/Projects` | Root of the project tree |
| `PROJECT_PICKER` | `fzf` | `tv` selects television; any other value selects fzf |
| `PROJECT_MARKDOWN_RENDERER` | `glow` | `bat` selects bat; any other value selects glow |
| `PROJECT_GLOW_STYLE` | `auto` | Passed to `glow --style` |
| `XDG_DATA_HOME` | `$HOME/.local/share` | Base directory for the usage history |
| `XDG_CONFIG_HOME` | `$HOME/.config` | Base directory for session configs and the template |
| `EDITOR` | `vi` | Editor used by `--edit` |

### Files

- **Usage history.** It is kept in `$XDG_DATA_HOME/project/history`, with one
  session name per line. Only the last 1000 entries are kept.
- **Session configs.** They are written to
  `$XDG_CONFIG_HOME/laio/<session>.yaml` the first time they are needed.
  An existing file is never overwritten.
- **Template.** If `$XDG_CONFIG_HOME/project/template.yaml` exists, it is the
  template for new configs. In it, `{name}` and `{path}` are replaced with the
  session name and the project path. Both are single-quoted for YAML. Without
  a template, the config gets two windows: `code`, which runs `nvim .`, and
  `shell`.

## Errors

The command reports errors on stderr and exits with status 1. An error looks
like `project: laio start failed for '<session>'`. It reports these cases:

- A missing `HOME`.
- A failed `laio start`.
- A failed tmux switch or attach.
- A file error.

If you leave the picker without a choice, the command exits quietly.

## Limits

- **Launcher and multiplexer.** The only session launcher is laio. The only
  multiplexer is tmux.
- **Glow styles.** The `project` command does not generate a glow style from
  the terminal palette. With `PROJECT_GLOW_STYLE=auto`, the value `auto` is
  passed to glow unchanged.
- **Palette-based glow styles in code.** `projswitch.markdown.GlowRenderer`
  can generate such a style, but only when you give it a `template` string.
  In that string, placeholders such as `%C1%` are filled from the palette
  found by `projswitch.palette.detect`. That function reads `PROJECT_PALETTE`
  (16 comma-separated colours) first, then the kitty theme files, and falls
  back to a standard palette. No style template ships with the package.