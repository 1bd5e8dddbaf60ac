import gymnasium as gym
import numpy as np
import pytest

from wordle.feedback import LetterClass
from wordle.gym_env import ACTION_BACKSPACE, ACTION_SUBMIT, LETTERS, GymWordleEnv
from wordle.sampler import WordSampler
from wordle.state import Outcome
from wordle.vocab import WordVocab

WORDS = ["allot", "total", "stoal", "bleed"]


@pytest.fixture
def env():
    vocab = WordVocab(list(WORDS))
    return GymWordleEnv(vocab, WordSampler(vocab, seed=0))


def type_word(env, word):
    for c in word:
        obs, reward, terminated, truncated, info = env.step(LETTERS.index(c))
        assert reward == 0.0
        assert not terminated
    return obs, info


def test_spaces_and_reset(env):
    obs, info = env.reset(options={"answer": "total"})
    assert env.action_space.n == 28
    assert obs.shape == (7, 5, 2)
    assert obs.dtype == np.int8
    assert env.observation_space.contains(obs)
    assert np.all(obs == -1)
    assert info["outcome"] is Outcome.IN_PROGRESS
    assert info["answer"] is None

    mask = info["action_mask"]
    assert mask.shape == (28,)
    assert np.all(mask[:26] == 1)
    assert mask[ACTION_BACKSPACE] == 0
    assert mask[ACTION_SUBMIT] == 0


def test_partial_match_reward_is_expected(env):
    env.reset(options={"answer": "total"})
    obs, info = type_word(env, "allot")
    assert np.all(info["action_mask"][:26] == 0)
    assert info["action_mask"][ACTION_SUBMIT] == 1
    assert list(obs[-1, :, 0]) == [LETTERS.index(c) for c in "allot"]

    obs, reward, terminated, truncated, info = env.step(ACTION_SUBMIT)
    # "allot" vs "total" -> four PRESENT, no CORRECT: 4*1 - 1
    assert reward == 3.0
    assert terminated is False
    assert truncated is False
    assert info["guesses"] == ["allot"]
    assert list(obs[0, :, 1]) == [1, 1, 0, 1, 1]
    assert np.all(obs[-1] == -1)


def test_exact_solution_reward_and_done(env):
    env.reset(options={"answer": "total"})
    type_word(env, "total")
    obs, reward, terminated, truncated, info = env.step(ACTION_SUBMIT)
    # 5 greens * 2 - 1 step + 10 bonus
    assert reward == 19.0
    assert terminated is True
    assert info["outcome"] is Outcome.WON
    assert info["answer"] == "total"
    assert list(obs[0, :, 1]) == [int(LetterClass.CORRECT)] * 5
    assert not np.any(info["action_mask"])

    with pytest.raises(gym.error.ResetNeeded):
        env.step(0)


def test_rejected_submit_costs_invalid_penalty():
    vocab = WordVocab(list(WORDS))
    env = GymWordleEnv(vocab, WordSampler(vocab, seed=0), invalid_penalty=0.5)
    env.reset(options={"answer": "total"})
    type_word(env, "abcde")
    obs, reward, terminated, truncated, info = env.step(ACTION_SUBMIT)
    assert reward == -0.5
    assert info["guesses"] == []
    assert info["current"] == "abcde"


def test_backspace(env):
    env.reset(options={"answer": "total"})
    type_word(env, "to")
    obs, reward, terminated, truncated, info = env.step(ACTION_BACKSPACE)
    assert info["current"] == "t"
    assert obs[-1, 1, 0] == -1


def test_loss_terminates(env):
    env.reset(options={"answer": "total"})
    for _ in range(6):
        type_word(env, "bleed")
        obs, reward, terminated, truncated, info = env.step(ACTION_SUBMIT)
    assert terminated is True
    assert info["outcome"] is Outcome.LOST
    assert info["answer"] == "total"


def test_seeded_reset_is_reproducible(env):
    env.reset(seed=42)
    first = env.game.answer
    env.reset(seed=42)
    assert env.game.answer == first
    assert first in WORDS


def test_step_requires_reset_and_valid_action(env):
    with pytest.raises(gym.error.ResetNeeded):
        env.step(0)
    env.reset()
    with pytest.raises(gym.error.InvalidAction):
        env.step(28)


def test_submit_mask_follows_game_dictionary(env):
    env.reset(options={"answer": "total"})
    obs, info = type_word(env, "stoal")
    assert info["action_mask"][ACTION_SUBMIT] == 1
    env.step(ACTION_BACKSPACE)
    obs, info = type_word(env, "x")
    assert info["current"] == "stoax"
    assert info["action_mask"][ACTION_SUBMIT] == 0
