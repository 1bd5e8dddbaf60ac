import pytest

from wordle.feedback import LetterClass
from wordle.sampler import WordSampler
from wordle.state import GameState, Outcome
from wordle.vocab import WordVocab

C, P, A = LetterClass.CORRECT, LetterClass.PRESENT, LetterClass.ABSENT

WORDS = ["crane", "slate", "speed", "erase", "alloy", "llama", "total", "allot", "adieu", "pious"]


@pytest.fixture
def dictionary():
    return WordVocab(list(WORDS))


@pytest.fixture
def game(dictionary):
    return GameState(dictionary, "erase")


def type_word(game, word):
    for c in word:
        game.input_letter(c)


def play(game, word):
    type_word(game, word)
    return game.submit_guess()


def test_initial_state(game):
    assert game.current == ""
    assert game.guesses == ()
    assert game.outcome() is Outcome.IN_PROGRESS


def test_input_is_lowercased_and_capped(game):
    type_word(game, "SPEEDYGONZALES")
    assert game.current == "speed"


def test_non_letters_are_ignored(game):
    for c in ["1", " ", "-", "é", "", "ab", None]:
        game.input_letter(c)
    assert game.current == ""
    type_word(game, "s1p")
    assert game.current == "sp"


def test_erase(game):
    type_word(game, "spe")
    game.erase_letter()
    assert game.current == "sp"


def test_erase_on_empty_is_noop(game):
    game.erase_letter()
    game.erase_letter()
    assert game.current == ""
    assert game.guesses == ()


def test_short_guess_is_rejected(game):
    type_word(game, "spee")
    assert game.submit_guess() is False
    assert game.current == "spee"
    assert game.guesses == ()


def test_unknown_word_is_rejected(game):
    type_word(game, "abcde")
    assert game.submit_guess() is False
    assert game.current == "abcde"
    assert game.guesses == ()


def test_accepted_guess_moves_to_history(game):
    assert play(game, "speed") is True
    assert game.current == ""
    assert game.guesses == ("speed",)
    assert game.outcome() is Outcome.IN_PROGRESS


def test_win(game):
    play(game, "speed")
    play(game, "erase")
    assert game.outcome() is Outcome.WON


def test_win_on_last_guess_beats_loss(game):
    for word in ["crane", "slate", "speed", "alloy", "llama"]:
        play(game, word)
    assert game.outcome() is Outcome.IN_PROGRESS
    play(game, "erase")
    assert len(game.guesses) == 6
    assert game.outcome() is Outcome.WON


def test_loss_after_six_misses(game):
    for word in ["crane", "slate", "speed", "alloy", "llama", "total"]:
        play(game, word)
    assert game.outcome() is Outcome.LOST


def test_finished_game_ignores_input(game):
    play(game, "erase")
    type_word(game, "crane")
    game.erase_letter()
    assert game.submit_guess() is False
    assert game.current == ""
    assert game.guesses == ("erase",)


def test_render_model_hides_answer_until_the_end(game):
    play(game, "speed")
    type_word(game, "al")
    model = game.render_model()
    assert model.answer is None
    assert model.current == "al"
    assert model.outcome is Outcome.IN_PROGRESS
    assert model.rows == (("speed", (P, A, P, P, A)),)

    game.erase_letter()
    game.erase_letter()
    play(game, "erase")
    model = game.render_model()
    assert model.answer == "erase"
    assert model.outcome is Outcome.WON
    assert model.rows[-1] == ("erase", (C,) * 5)


def test_keyboard_never_downgrades(dictionary):
    game = GameState(dictionary, "llama")
    play(game, "slate")  # l and a CORRECT, s/t/e ABSENT
    play(game, "alloy")  # a PRESENT, l CORRECT and PRESENT, o/y ABSENT
    keyboard = game.render_model().keyboard
    assert keyboard["l"] is C
    assert keyboard["a"] is C
    assert keyboard["o"] is A
    assert keyboard["s"] is A
    assert "z" not in keyboard


def test_from_sampler_draws_from_answers(dictionary):
    answers = WordVocab(["crane", "slate"])
    game = GameState.from_sampler(dictionary, WordSampler(answers, seed=3))
    assert game.answer in answers
    same = GameState.from_sampler(dictionary, WordSampler(answers, seed=3))
    assert same.answer == game.answer


def test_constructor_validation(dictionary):
    with pytest.raises(TypeError):
        GameState(list(WORDS), "erase")
    with pytest.raises(ValueError):
        GameState(dictionary, "eras")
    with pytest.raises(ValueError):
        GameState(dictionary, "ERASE")
    with pytest.raises(TypeError):
        GameState.from_sampler(dictionary, "erase")
