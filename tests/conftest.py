import pytest

from bible_rope.models import Translation
from bible_rope.parser import build_verse_table


KJV_TEXT = (
    "King James Bible\n"
    "Pure Cambridge Edition\n"
    "Mark 1:1\tThe beginning of the gospel of Jesus Christ, the Son of God;\n"
    "Mark 1:2\tAs it is written in the prophets,\n"
    "Mark 2:1\tAnd again he entered into Capernaum after some days;\n"
    "Mark 3:1\tAnd he entered again into the synagogue;\n"
    "John 3:16\tFor God so loved the world, that he gave his only begotten Son,\n"
    "1 Corinthians 13:4\tCharity suffereth long, and is kind;\n"
)

WEB_TEXT = (
    "World English Bible\n"
    "\n"
    "John 3:16\tFor God so loved the world, that he gave his one and only Son,\n"
)

YLT_TEXT = (
    "Young's Literal Translation\n"
    "\n"
    "Genesis 1:1\tIn the beginning of God's preparing the heavens and the earth --\n"
)


@pytest.fixture
def kjv():
    table, _ = build_verse_table(KJV_TEXT)
    return Translation(title="King James Bible", table=table)


@pytest.fixture
def translations(kjv):
    web, _ = build_verse_table(WEB_TEXT)
    ylt, _ = build_verse_table(YLT_TEXT)
    return [
        kjv,
        Translation(title="World English Bible", table=web),
        Translation(title="Young's Literal Translation", table=ylt),
    ]


class Console:
    """Scripted stand-in for input() and print()."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def say(self, line):
        self.output.append(line)


@pytest.fixture
def console():
    return Console
