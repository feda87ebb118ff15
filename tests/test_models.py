from bible_rope.models import Translation, VerseRecord, VerseTable


def test_add_and_get():
    table = VerseTable()
    table.add("Genesis", 1, 1, "In the beginning")

    assert table.get("Genesis", 1, 1) == "In the beginning"
    assert len(table) == 1


def test_missing_reference_is_not_found():
    table = VerseTable()
    table.add("Genesis", 1, 1, "In the beginning")

    assert table.get("Genesis", 1, 2) is None
    assert table.get("Genesis", 2, 1) is None
    assert table.get("Exodus", 1, 1) is None


def test_last_insert_wins():
    table = VerseTable()
    table.add("John", 3, 16, "first")
    table.add("John", 3, 16, "second")

    assert table.get("John", 3, 16) == "second"
    assert len(table) == 1


def test_chapter_and_verse_numbers_are_sorted():
    table = VerseTable()
    for chapter, verse in [(3, 2), (1, 5), (3, 1), (2, 1), (1, 1)]:
        table.add("Mark", chapter, verse, "text")

    assert table.chapter_numbers("Mark") == [1, 2, 3]
    assert table.verse_numbers("Mark", 1) == [1, 5]
    assert table.verse_numbers("Mark", 4) == []
    assert table.chapter_numbers("Luke") == []


def test_add_record():
    record = VerseRecord("1 Corinthians", 13, 4, "Charity suffereth long")
    table = VerseTable()
    table.add_record(record)

    assert table.get("1 Corinthians", 13, 4) == "Charity suffereth long"
    assert len(table) == 1


def test_translation_lookup():
    translation = Translation(title="KJV")
    translation.table.add("John", 3, 16, "For God so loved the world")

    assert translation.lookup("John", 3, 16) == "For God so loved the world"
    assert translation.lookup("John", 3, 17) is None
