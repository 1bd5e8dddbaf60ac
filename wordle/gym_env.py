from __future__ import annotations

import string

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from wordle.events import BACKSPACE, SUBMIT, Event, apply_event
from wordle.feedback import LetterClass, is_solved
from wordle.sampler import WordSampler
from wordle.state import MAX_GUESSES, WORD_LENGTH, GameState, Outcome
from wordle.vocab import WordVocab

LETTERS = string.ascii_lowercase
ACTION_BACKSPACE = len(LETTERS)
ACTION_SUBMIT = len(LETTERS) + 1
EMPTY = -1


class GymWordleEnv(gym.Env):
    """
    Gymnasium environment that plays the keyboard game headlessly.

    - Action space: Discrete(28). 0..25 type a..z, 26 is backspace, 27 submits.
    - Observation: int8 array of shape (max_guesses + 1, word_length, 2).
      Rows 0..max_guesses-1 are submitted guesses, the last row is the current
      input. Channel 0 holds the letter index, channel 1 the LetterClass
      value; both are -1 where there is nothing to show.
    - Reward: an accepted guess earns alpha*greens + beta*yellows - step_penalty,
      plus success_bonus when it solves the game. A rejected submit costs
      invalid_penalty. Typing and erasing are free.
    - info contains an 'action_mask' (int8 array) of actions that change the state.
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        dictionary: WordVocab,
        sampler: WordSampler,
        *,
        alpha: float = 2.0,
        beta: float = 1.0,
        step_penalty: float = 1.0,
        success_bonus: float = 10.0,
        invalid_penalty: float = 0.0,
    ) -> None:
        if not isinstance(dictionary, WordVocab):
            raise TypeError("dictionary must be a WordVocab")
        if not isinstance(sampler, WordSampler):
            raise TypeError("sampler must be a WordSampler")

        self.dictionary = dictionary
        self.sampler = sampler
        self.alpha = float(alpha)
        self.beta = float(beta)
        self.step_penalty = float(step_penalty)
        self.success_bonus = float(success_bonus)
        self.invalid_penalty = float(invalid_penalty)

        self.game: GameState | None = None

        self.observation_space = spaces.Box(
            low=EMPTY, high=len(LETTERS) - 1, shape=(MAX_GUESSES + 1, WORD_LENGTH, 2), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(LETTERS) + 2)

    # -------------------------
    # Gymnasium API
    # -------------------------
    def reset(self, *, seed: int | None = None, options: dict | None = None):
        super().reset(seed=seed)
        if seed is not None:
            self.sampler.set_seed(seed)

        answer = (options or {}).get("answer")
        if answer is None:
            self.game = GameState.from_sampler(self.dictionary, self.sampler)
        else:
            self.game = GameState(self.dictionary, answer)

        return self._observation(), self._info()

    def step(self, action: int):
        if self.game is None:
            raise gym.error.ResetNeeded("call reset() before step()")
        action = int(action)
        if not self.action_space.contains(action):
            raise gym.error.InvalidAction(f"Invalid action: {action}")
        if self.game.finished:
            raise gym.error.ResetNeeded("episode is over, call reset()")

        reward = 0.0
        event = self.action_to_event(action)
        if action == ACTION_SUBMIT:
            before = len(self.game.guesses)
            apply_event(self.game, event)
            if len(self.game.guesses) > before:
                reward = self._guess_reward()
            else:
                reward = -self.invalid_penalty
        else:
            apply_event(self.game, event)

        terminated = self.game.finished
        return self._observation(), reward, terminated, False, self._info()

    # -------------------------
    # Helpers
    # -------------------------
    @staticmethod
    def action_to_event(action: int) -> Event:
        if action == ACTION_BACKSPACE:
            return BACKSPACE
        if action == ACTION_SUBMIT:
            return SUBMIT
        return Event.letter(LETTERS[action])

    def get_action_mask(self) -> np.ndarray:
        """Mask of actions that would change the state, for action-masking wrappers."""
        if self.game is None:
            raise gym.error.ResetNeeded("call reset() before get_action_mask()")
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self.game.finished:
            return mask
        current = self.game.current
        if len(current) < self.game.word_length:
            mask[: len(LETTERS)] = 1
        if current:
            mask[ACTION_BACKSPACE] = 1
        if len(current) == self.game.word_length and current in self.game.dictionary:
            mask[ACTION_SUBMIT] = 1
        return mask

    def _guess_reward(self) -> float:
        _, pattern = self.game.feedback()[-1]
        greens = sum(1 for p in pattern if p == LetterClass.CORRECT)
        yellows = sum(1 for p in pattern if p == LetterClass.PRESENT)
        reward = self.alpha * greens + self.beta * yellows - self.step_penalty
        if is_solved(pattern):
            reward += self.success_bonus
        return reward

    def _observation(self) -> np.ndarray:
        obs = np.full(self.observation_space.shape, EMPTY, dtype=np.int8)
        for row, (guess, pattern) in enumerate(self.game.feedback()):
            for col, (ch, cls) in enumerate(zip(guess, pattern)):
                obs[row, col, 0] = LETTERS.index(ch)
                obs[row, col, 1] = int(cls)
        for col, ch in enumerate(self.game.current):
            obs[-1, col, 0] = LETTERS.index(ch)
        return obs

    def _info(self) -> dict:
        outcome = self.game.outcome()
        return {
            "outcome": outcome,
            "guesses": list(self.game.guesses),
            "current": self.game.current,
            "answer": self.game.answer if outcome is not Outcome.IN_PROGRESS else None,
            "action_mask": self.get_action_mask(),
        }
