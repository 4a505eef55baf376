"""
Test script for Tic Tac Toe Classic modules.
Run this to verify all components work before playing.
"""

import sys


def test_display_config():
    """Test display configuration."""
    print("\n=== Testing Display Config ===")
    from display.config import DisplayConfig
    config = DisplayConfig()
    print(f"  Board size: {config.BOARD_SIZE}x{config.BOARD_SIZE}")
    print(f"  Cell size: {config.CELL_IMAGE_SIZE}px")
    assert config.BOARD_SIZE == 3
    assert config.CELL_IMAGE_SIZE * config.BOARD_SIZE <= config.BOARD_IMAGE_SIZE
    assert set(config.PLAYER_LABELS) == {"X", "O"}


def test_game_logic():
    """Test game logic components."""
    print("\n=== Testing Game Logic ===")
    from logic.game_state import GameState, MoveStatus, Player
    from logic.move_validator import MoveValidator
    from logic.win_checker import WinChecker

    # Test game state
    game = GameState()
    print(f"  Initial player: {game.current_player.symbol}")
    assert game.current_player == Player.X

    # Test make move
    result = game.attempt_move(4)
    print(f"  Made move at 4: {result.status.value}")
    assert result.status == MoveStatus.CONTINUE

    # Test validator
    validator = MoveValidator()
    validation = validator.validate_move(game, 0)
    print(f"  Validate 0: valid={validation.is_valid}")
    assert validation.is_valid

    # Test win checker
    checker = WinChecker()
    winner = checker.check_winner(game.board)
    print(f"  Winner check: {winner}")
    assert winner is None


def test_session():
    """Test a full round through the session."""
    print("\n=== Testing Session ===")
    from logic.session import GameSession

    session = GameSession()
    for index in [0, 3, 1, 4, 2]:
        result = session.play(index)
    print(f"  Outcome: {result.outcome}")
    print(f"  Score: {session.scoreboard.format()}")
    assert session.is_round_over
    assert session.scoreboard.x_wins == 1


def test_renderer():
    """Test board rendering."""
    print("\n=== Testing Board Renderer ===")
    from display.board_renderer import BoardRenderer
    from logic.game_state import GameState

    renderer = BoardRenderer()
    image = renderer.render(GameState())
    print(f"  Image shape: {image.shape}")
    assert image.shape == (renderer.size, renderer.size, 3)


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   Tic Tac Toe Classic - Module Tests")
    print("=" * 60)

    tests = {
        "Display Config": test_display_config,
        "Game Logic": test_game_logic,
        "Session": test_session,
        "Board Renderer": test_renderer,
    }

    results = {}
    for name, test in tests.items():
        try:
            test()
            print(f"  ✓ {name} OK")
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e}")
            import traceback
            traceback.print_exc()
            results[name] = False

    print("\n" + "=" * 60)
    print("   Test Results")
    print("=" * 60)

    all_passed = True
    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
        if not passed:
            all_passed = False

    print("=" * 60)

    if all_passed:
        print("\n🎉 All tests passed! Ready to play Tic Tac Toe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
