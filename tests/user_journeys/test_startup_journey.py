"""User journey: launching the trainer loads every sound, then plays one."""

import json
import logging
import random

import pytest

import main
from musikkhistorie.domain.catalog import CATALOG
from musikkhistorie.domain.errors import AssetLoadError
from musikkhistorie.domain.model import PlaybackState
from musikkhistorie.usecases.start_session import StartSessionUseCase


class TestStartSession:
    """As a student opening the trainer, a random work starts playing once everything is loaded."""

    def test_session_starts_playing_a_random_work(self, asset_root, audio):
        session = StartSessionUseCase(audio, rng=random.Random(3)).execute(str(asset_root))

        assert session.state is PlaybackState.PLAYING
        assert audio.played == [CATALOG.asset_key_of(session.current)]

    def test_autoplay_can_be_disabled(self, asset_root, audio):
        session = StartSessionUseCase(audio).execute(str(asset_root), autoplay=False)

        assert session.state is PlaybackState.IDLE
        assert audio.played == []

    def test_no_session_when_an_asset_is_missing(self, tmp_path, write_assets, audio):
        write_assets(tmp_path, skip=("the_king_of_denmarks_galliard.mp3",))

        with pytest.raises(AssetLoadError):
            StartSessionUseCase(audio).execute(str(tmp_path))

        assert audio.played == []


class TestProcessBoundary:
    """As a student with an incomplete install, the trainer refuses to start and tells me why."""

    @pytest.fixture
    def workdir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("MUSIKKHISTORIE_SIMULATION", raising=False)
        (tmp_path / "files").mkdir()
        return tmp_path

    def test_missing_asset_exits_non_zero_naming_it(self, workdir, write_assets, audio_factory, monkeypatch, capsys):
        write_assets(workdir / "files", skip=("the_king_of_denmarks_galliard.mp3",))
        monkeypatch.setattr(main, "PygameAudioAdapter", audio_factory)

        with pytest.raises(SystemExit) as exc:
            main.main()

        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert "Couldn't load sound the_king_of_denmarks_galliard.mp3: No such file" in out

    def test_simulation_mode_opens_window_with_silent_audio(self, workdir, write_assets, monkeypatch):
        write_assets(workdir / "files")
        (workdir / "config.json").write_text(json.dumps({"simulation_mode": True}), encoding="utf-8")
        opened = []
        monkeypatch.setattr("musikkhistorie.ui.app.run_app", lambda session, cfg: opened.append(session))

        main.main()

        assert len(opened) == 1
        session = opened[0]
        assert session.audio.played == [CATALOG.asset_key_of(session.current)]

    def test_unknown_log_level_falls_back_to_info(self, workdir, write_assets, monkeypatch, capsys):
        write_assets(workdir / "files")
        (workdir / "config.json").write_text(
            json.dumps({"simulation_mode": True, "log_level": "verbose"}), encoding="utf-8"
        )
        monkeypatch.setattr("musikkhistorie.ui.app.run_app", lambda session, cfg: None)

        main.main()

        assert "Unknown log_level 'verbose'" in capsys.readouterr().out


class TestLogLevel:
    """As a user editing config.json, level names are read case-insensitively."""

    def test_known_level_names_map_to_logging_levels(self):
        assert main._log_level("debug") == logging.DEBUG
        assert main._log_level(" WARNING ") == logging.WARNING

    def test_unknown_level_name_maps_to_info(self):
        assert main._log_level("verbose") == logging.INFO
