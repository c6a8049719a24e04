"""Tests for cue sheet parsing."""

import codecs
from pathlib import Path

from musicorg.features.metadata import CueSheetParser, CueTrack
from musicorg.features.metadata.usecases.cue_sheet import read_text_guessing

SAMPLE_CUE = """\
REM GENRE Rock
REM DATE 1973-03-01
REM COMMENT "ExactAudioCopy v1.0"
PERFORMER "Pink Floyd"
TITLE "The Dark Side of the Moon"
FILE "Dark Side.flac" WAVE
  TRACK 01 AUDIO
    TITLE "Speak to Me"
    INDEX 01 00:00:00
  TRACK 02 AUDIO
    TITLE "Breathe"
    PERFORMER "David Gilmour"
    INDEX 00 01:05:10
    INDEX 01 01:07:00
"""


class TestCueSheetParser:
    """Test cases for CueSheetParser."""

    def test_parses_album_fields(self) -> None:
        sheet = CueSheetParser.parse(SAMPLE_CUE)

        assert sheet.file == "Dark Side.flac"
        assert sheet.title == "The Dark Side of the Moon"
        assert sheet.performer == "Pink Floyd"
        assert sheet.genre == "Rock"
        assert sheet.date == "1973-03-01"
        assert sheet.year == 1973

    def test_parses_tracks_in_order(self) -> None:
        sheet = CueSheetParser.parse(SAMPLE_CUE)

        assert sheet.tracks == (
            CueTrack(number=1, title="Speak to Me", performer=None),
            CueTrack(number=2, title="Breathe", performer="David Gilmour"),
        )

    def test_unquoted_values(self) -> None:
        sheet = CueSheetParser.parse("TITLE Moon\nFILE moon.ape WAVE\nTRACK 1 AUDIO\nTITLE Speak\n")

        assert sheet.title == "Moon"
        assert sheet.file == "moon.ape"
        assert sheet.tracks[0].title == "Speak"

    def test_rem_after_first_track_is_ignored(self) -> None:
        sheet = CueSheetParser.parse('TITLE "X"\nTRACK 01 AUDIO\nREM GENRE Jazz\n')
        assert sheet.genre is None

    def test_only_first_file_is_kept(self) -> None:
        sheet = CueSheetParser.parse('FILE "cd1.flac" WAVE\nTRACK 01 AUDIO\nFILE "cd2.flac" WAVE\n')
        assert sheet.file == "cd1.flac"

    def test_empty_sheet(self) -> None:
        sheet = CueSheetParser.parse("")

        assert sheet.file is None
        assert sheet.tracks == ()
        assert sheet.year is None


class TestReadTextGuessing:
    """Cue sheets come in whatever encoding the ripper used."""

    def test_utf8_with_bom(self, tmp_path: Path) -> None:
        path = tmp_path / "a.cue"
        _ = path.write_bytes(codecs.BOM_UTF8 + "TITLE \"Café\"\n".encode("utf-8"))
        assert read_text_guessing(path) == 'TITLE "Café"\n'

    def test_utf16(self, tmp_path: Path) -> None:
        path = tmp_path / "a.cue"
        _ = path.write_bytes('TITLE "Мелодия"\n'.encode("utf-16"))
        assert read_text_guessing(path) == 'TITLE "Мелодия"\n'

    def test_cp1251(self, tmp_path: Path) -> None:
        path = tmp_path / "a.cue"
        _ = path.write_bytes('PERFORMER "Рахманинов"\n'.encode("cp1251"))

        sheet = CueSheetParser.parse_file(path)
        assert sheet.performer == "Рахманинов"
