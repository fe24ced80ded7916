"""
Unit tests for the granian launcher
"""

from unittest.mock import patch

import pytest

from script import run_server
from src.platform.config.core_setting import Settings


pytestmark = pytest.mark.unit

# Use module name to avoid hardcoding paths in patch()
_MODULE = run_server.__name__


class TestBuildCommand:
    def test_uses_server_settings(self) -> None:
        """Host, port and worker count come from settings"""
        # Given
        config = Settings(SERVER_HOST='127.0.0.1', SERVER_PORT=9000, SERVER_WORKERS=4)

        # When
        command = run_server.build_command(config)

        # Then
        assert command == [
            'granian',
            'src.main:app',
            '--interface',
            'asgi',
            '--host',
            '127.0.0.1',
            '--port',
            '9000',
            '--workers',
            '4',
        ]

    def test_workers_must_be_positive(self) -> None:
        """Zero workers is rejected when settings load"""
        with pytest.raises(ValueError):
            Settings(SERVER_WORKERS=0)


class TestMain:
    def test_execs_granian(self) -> None:
        """main() hands the process over to granian"""
        with patch(f'{_MODULE}.os.execvp') as mock_execvp:
            run_server.main()

        mock_execvp.assert_called_once()
        program, argv = mock_execvp.call_args.args
        assert program == 'granian'
        assert argv[1] == run_server.APP_TARGET
