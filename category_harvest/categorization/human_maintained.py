"""Human-maintained categorization data.

This file contains data that should be manually curated and extended:
the closed set of category names and the weighted rule table scored
against every package template.
"""

from typing import Final

from category_harvest.models.model_classification import CategorySpec, FieldSelector, Rule

NAME = FieldSelector.NAME
DESC = FieldSelector.SHORT_DESC
DEPENDS = FieldSelector.DEPENDS
PATH = FieldSelector.PATH

# Closed set of categories; every suggestion must use one of these
CATEGORY_NAMES: Final[tuple[str, ...]] = (
    "Books",
    "Browsers",
    "Chat",
    "Development",
    "Education",
    "E-mail",
    "Finance",
    "Gaming",
    "Graphics",
    "Kernels",
    "Music",
    "News",
    "Office",
    "Other",
    "Photos",
    "Productivity",
    "System",
    "Tools and Utilities",
    "Video",
)


# Rule table, in declaration order (equal scores keep this order)
CATEGORY_SPECS: Final[tuple[CategorySpec, ...]] = (
    CategorySpec(
        name="Books",
        description="E-book readers and library managers",
        floor=4.5,
        rules=(
            Rule(NAME, "calibre", 7.0),
            Rule(NAME, "foliate", 6.0),
            Rule(DESC, "ebook", 4.5),
            Rule(DESC, "epub", 4.0),
            Rule(DESC, "reader", 3.5),
            Rule(DEPENDS, "calibre", 5.0),
            Rule(PATH, "books", 3.0),
            Rule(PATH, "ebook", 3.0),
        ),
    ),
    CategorySpec(
        name="Browsers",
        description="Web browsers and browser engines",
        floor=5.0,
        rules=(
            Rule(NAME, "browser", 4.0),
            Rule(DESC, "web browser", 5.5),
            Rule(DESC, "browser", 4.5),
            Rule(NAME, "firefox", 7.0),
            Rule(NAME, "chrom", 6.5),
            Rule(NAME, "webkit", 4.5),
            Rule(NAME, "palemoon", 6.0),
            Rule(NAME, "vivaldi", 6.0),
            Rule(NAME, "falkon", 6.0),
            Rule(DEPENDS, "webkit", 3.5),
            Rule(DEPENDS, "firefox", 3.5),
            Rule(PATH, "browser", 3.0),
        ),
    ),
    CategorySpec(
        name="Chat",
        description="Instant messaging and IRC clients",
        floor=4.5,
        rules=(
            Rule(NAME, "chat", 5.5),
            Rule(DESC, "chat", 4.5),
            Rule(DESC, "messag", 4.0),
            Rule(NAME, "matrix", 5.0),
            Rule(NAME, "element", 5.5),
            Rule(NAME, "discord", 6.0),
            Rule(NAME, "slack", 5.0),
            Rule(NAME, "telegram", 6.0),
            Rule(NAME, "signal", 6.0),
            Rule(NAME, "tox", 4.5),
            Rule(NAME, "irc", 4.5),
            Rule(DEPENDS, "libpurple", 4.0),
            Rule(DEPENDS, "weechat", 4.0),
            Rule(PATH, "chat", 3.5),
        ),
    ),
    CategorySpec(
        name="Development",
        description="Compilers, debuggers and build tools",
        floor=4.5,
        rules=(
            Rule(DESC, "compiler", 4.5),
            Rule(DESC, "development", 4.0),
            Rule(DESC, "debugger", 4.0),
            Rule(DESC, "programming", 4.0),
            Rule(DESC, "sdk", 4.0),
            Rule(DESC, "toolchain", 4.0),
            Rule(NAME, "gcc", 5.5),
            Rule(NAME, "clang", 5.5),
            Rule(NAME, "gdb", 5.0),
            Rule(NAME, "lldb", 5.0),
            Rule(NAME, "rust", 4.5),
            Rule(NAME, "cargo", 4.5),
            Rule(NAME, "cmake", 4.5),
            Rule(NAME, "make", 4.0),
            Rule(NAME, "meson", 4.5),
            Rule(NAME, "ninja", 4.5),
            Rule(DEPENDS, "gtk-doc", 3.5),
            Rule(DEPENDS, "cmake", 3.5),
            Rule(PATH, "/lang", 3.5),
            Rule(PATH, "/devel", 3.5),
        ),
    ),
    CategorySpec(
        name="Education",
        description="Learning, science and reference software",
        floor=4.5,
        rules=(
            Rule(DESC, "education", 5.0),
            Rule(DESC, "learn", 4.0),
            Rule(DESC, "math", 4.5),
            Rule(DESC, "science", 4.0),
            Rule(DESC, "chemistry", 4.5),
            Rule(DESC, "astronomy", 4.5),
            Rule(DESC, "geography", 4.5),
            Rule(NAME, "khan", 5.0),
            Rule(NAME, "anki", 6.0),
            Rule(NAME, "stellarium", 6.0),
            Rule(DEPENDS, "khan", 5.0),
        ),
    ),
    CategorySpec(
        name="E-mail",
        description="Mail clients and mail tooling",
        floor=4.5,
        rules=(
            Rule(NAME, "mail", 5.0),
            Rule(NAME, "email", 5.5),
            Rule(DESC, "email", 5.5),
            Rule(DESC, "mail", 5.0),
            Rule(NAME, "imap", 4.5),
            Rule(NAME, "smtp", 4.5),
            Rule(NAME, "thunderbird", 6.5),
            Rule(NAME, "geary", 6.5),
            Rule(NAME, "mutt", 5.0),
            Rule(DEPENDS, "notmuch", 4.5),
            Rule(DEPENDS, "dovecot", 4.0),
            Rule(PATH, "mail", 3.5),
        ),
    ),
    CategorySpec(
        name="Finance",
        description="Accounting and personal finance",
        floor=4.5,
        rules=(
            Rule(DESC, "finance", 6.0),
            Rule(DESC, "bank", 5.0),
            Rule(DESC, "budget", 5.0),
            Rule(DESC, "account", 4.5),
            Rule(NAME, "ledger", 5.0),
            Rule(NAME, "gnucash", 6.5),
            Rule(NAME, "kresus", 6.0),
            Rule(NAME, "money", 4.5),
            Rule(DEPENDS, "finance", 4.0),
            Rule(PATH, "finance", 4.0),
        ),
    ),
    CategorySpec(
        name="Gaming",
        description="Games, game engines and launchers",
        floor=4.5,
        rules=(
            Rule(DESC, "game", 5.0),
            Rule(DESC, "gaming", 5.5),
            Rule(NAME, "game", 5.0),
            Rule(NAME, "doom", 4.5),
            Rule(NAME, "quake", 4.5),
            Rule(NAME, "steam", 6.5),
            Rule(NAME, "lutris", 6.5),
            Rule(NAME, "minetest", 6.0),
            Rule(NAME, "supertux", 6.0),
            Rule(DEPENDS, "sdl", 4.0),
            Rule(DEPENDS, "openal", 3.5),
            Rule(DEPENDS, "vulkan", 3.5),
            Rule(PATH, "games", 4.5),
        ),
    ),
    CategorySpec(
        name="Graphics",
        description="Drawing, 3D and image editing",
        floor=4.5,
        rules=(
            Rule(DESC, "graphics", 5.5),
            Rule(DESC, "drawing", 5.0),
            Rule(DESC, "3d", 4.5),
            Rule(DESC, "render", 4.5),
            Rule(DESC, "cad", 4.5),
            Rule(NAME, "inkscape", 6.5),
            Rule(NAME, "blender", 6.5),
            Rule(NAME, "krita", 6.5),
            Rule(NAME, "gimp", 6.5),
            Rule(DEPENDS, "opengl", 4.0),
            Rule(PATH, "graphics", 4.0),
        ),
    ),
    CategorySpec(
        name="Kernels",
        description="Linux kernel packages",
        floor=5.5,
        rules=(
            Rule(NAME, "linux", 7.0),
            Rule(NAME, "kernel", 7.0),
            Rule(NAME, "rt", 4.5),
            Rule(DESC, "kernel", 6.0),
            Rule(PATH, "kernel", 5.5),
            Rule(PATH, "linux", 5.5),
        ),
    ),
    CategorySpec(
        name="Music",
        description="Audio players and music production",
        floor=4.5,
        rules=(
            Rule(DESC, "music", 5.5),
            Rule(DESC, "audio", 4.5),
            Rule(NAME, "music", 5.0),
            Rule(NAME, "player", 4.5),
            Rule(NAME, "mix", 4.5),
            Rule(NAME, "daw", 5.0),
            Rule(NAME, "spotify", 6.5),
            Rule(NAME, "clementine", 6.0),
            Rule(NAME, "rhythmbox", 6.0),
            Rule(DEPENDS, "alsa", 3.5),
            Rule(DEPENDS, "pulseaudio", 3.5),
            Rule(PATH, "audio", 4.0),
        ),
    ),
    CategorySpec(
        name="News",
        description="Feed readers and news clients",
        floor=4.5,
        rules=(
            Rule(DESC, "news", 6.0),
            Rule(DESC, "rss", 5.5),
            Rule(NAME, "rss", 5.5),
            Rule(NAME, "news", 6.0),
            Rule(NAME, "feed", 4.5),
            Rule(DEPENDS, "rss", 4.0),
            Rule(PATH, "news", 4.0),
        ),
    ),
    CategorySpec(
        name="Office",
        description="Office suites, word processors and spreadsheets",
        floor=4.5,
        rules=(
            Rule(DESC, "office", 5.5),
            Rule(DESC, "spreadsheet", 5.5),
            Rule(DESC, "word", 5.0),
            Rule(DESC, "presentation", 5.0),
            Rule(NAME, "libreoffice", 7.0),
            Rule(NAME, "onlyoffice", 6.5),
            Rule(NAME, "calligra", 6.0),
            Rule(NAME, "abiword", 6.0),
            Rule(NAME, "gnumeric", 6.0),
            Rule(DEPENDS, "libreoffice", 5.0),
        ),
    ),
    CategorySpec(
        name="Other",
        description="Fallback for packages no rule matched",
        floor=0.0,
        rules=(),
    ),
    CategorySpec(
        name="Photos",
        description="Photo management and raw development",
        floor=4.5,
        rules=(
            Rule(DESC, "photo", 6.0),
            Rule(DESC, "photograph", 5.5),
            Rule(NAME, "photo", 6.0),
            Rule(NAME, "darktable", 6.5),
            Rule(NAME, "rawtherapee", 6.5),
            Rule(NAME, "shotwell", 6.0),
            Rule(DESC, "camera", 5.0),
            Rule(PATH, "photo", 4.0),
        ),
    ),
    CategorySpec(
        name="Productivity",
        description="Task, note and calendar applications",
        floor=4.5,
        rules=(
            Rule(DESC, "productivity", 5.5),
            Rule(DESC, "task", 5.0),
            Rule(DESC, "todo", 5.0),
            Rule(DESC, "note", 4.5),
            Rule(DESC, "calendar", 4.5),
            Rule(NAME, "planner", 5.0),
            Rule(NAME, "organizer", 5.0),
            Rule(NAME, "journal", 4.5),
            Rule(DEPENDS, "todo", 4.0),
            Rule(PATH, "productivity", 4.0),
        ),
    ),
    CategorySpec(
        name="System",
        description="Init, daemons, boot and filesystem tooling",
        floor=3.5,
        rules=(
            Rule(DESC, "system", 4.0),
            Rule(DESC, "daemon", 4.0),
            Rule(DESC, "service", 4.0),
            Rule(DESC, "filesystem", 4.0),
            Rule(DESC, "kernel", 4.0),
            Rule(NAME, "systemd", 5.0),
            Rule(NAME, "elogind", 5.0),
            Rule(NAME, "udev", 5.0),
            Rule(NAME, "grub", 5.0),
            Rule(DEPENDS, "systemd", 4.0),
            Rule(DEPENDS, "elogind", 4.0),
            Rule(DEPENDS, "udev", 4.0),
            Rule(PATH, "system", 4.0),
        ),
    ),
    CategorySpec(
        name="Tools and Utilities",
        description="General command-line and desktop utilities",
        floor=3.5,
        rules=(
            Rule(DESC, "utility", 4.5),
            Rule(DESC, "tool", 4.0),
            Rule(DESC, "command-line", 4.0),
            Rule(DESC, "cli", 4.0),
            Rule(NAME, "util", 4.0),
            Rule(NAME, "tool", 4.0),
            Rule(PATH, "/utils", 3.5),
            Rule(PATH, "/tools", 3.5),
        ),
    ),
    CategorySpec(
        name="Video",
        description="Video players, editors and streaming",
        floor=4.5,
        rules=(
            Rule(DESC, "video", 6.0),
            Rule(DESC, "media", 4.5),
            Rule(NAME, "mpv", 6.5),
            Rule(NAME, "vlc", 6.5),
            Rule(NAME, "ffmpeg", 6.0),
            Rule(NAME, "plex", 6.0),
            Rule(DESC, "stream", 5.0),
            Rule(DEPENDS, "ffmpeg", 5.0),
            Rule(DEPENDS, "gstreamer", 4.5),
            Rule(PATH, "video", 4.0),
        ),
    ),
)
