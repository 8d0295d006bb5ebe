import pytest

from mightydoom.music import LOOP_FOREVER, Music


class FakeMixer:
    def __init__(self):
        self.calls = []
        self.busy = False

    def load(self, path):
        self.calls.append(("load", path))

    def play(self, loops):
        self.calls.append(("play", loops))
        self.busy = True

    def stop(self):
        self.calls.append(("stop",))
        self.busy = False

    def unload(self):
        self.calls.append(("unload",))

    def get_busy(self):
        return self.busy


@pytest.fixture
def track(tmp_path):
    path = tmp_path / "Main_Menu_n64.wav64"
    path.write_bytes(b"\x00" * 16)
    return path


def test_load_missing_file_raises(tmp_path):
    music = Music(tmp_path, backend=FakeMixer())
    with pytest.raises(FileNotFoundError):
        music.load("missing.wav64")
    assert music.track is None


def test_load_starts_looping_playback(tmp_path, track):
    mixer = FakeMixer()
    music = Music(tmp_path, backend=mixer)
    path = music.load(track.name)
    assert path == track
    assert mixer.calls == [("load", str(track)), ("play", LOOP_FOREVER)]
    assert music.track == track.name


def test_play_without_track_does_nothing(tmp_path):
    mixer = FakeMixer()
    music = Music(tmp_path, backend=mixer)
    assert music.play() is False
    assert mixer.calls == []


def test_play_restarts_when_mixer_idle(tmp_path, track):
    mixer = FakeMixer()
    music = Music(tmp_path, backend=mixer)
    music.load(track.name)
    mixer.busy = False
    assert music.play() is True
    assert mixer.calls[-1] == ("play", LOOP_FOREVER)


def test_play_leaves_busy_mixer_alone(tmp_path, track):
    mixer = FakeMixer()
    music = Music(tmp_path, backend=mixer)
    music.load(track.name)
    count = len(mixer.calls)
    assert music.play() is True
    assert len(mixer.calls) == count


def test_stop_releases_track(tmp_path, track):
    mixer = FakeMixer()
    music = Music(tmp_path, backend=mixer)
    music.load(track.name)
    music.stop()
    assert music.track is None
    assert mixer.calls[-2:] == [("stop",), ("unload",)]
    assert music.play() is False


def test_loading_second_track_stops_first(tmp_path, track):
    other = tmp_path / "Tutorial_5_5_11_5.wav64"
    other.write_bytes(b"\x01")
    mixer = FakeMixer()
    music = Music(tmp_path, backend=mixer)
    music.load(track.name)
    music.load(other.name)
    assert ("stop",) in mixer.calls
    assert music.track == other.name