"""test_fishing_states.py — Per-state behavioural tests.

Every state is driven directly (no machine) with a SimpleContext whose
random draws are queued up front, so each roll is known.  Timer tests
use dt values that are exact in binary floating point wherever a
"progress reads exactly 1.0" claim is made; section 9 repeats the
key timers at 1/60 s frames, whose float sums fall just short.

Run:  python test_fishing_states.py      (or: pytest)
"""
from __future__ import annotations
import sys, math, random, traceback

from fishing.context import SimpleContext
from fishing.state import (
    FishingState, LostReason, PENDING, Pending, TransitionTo, progress, reached,
)
from fishing.states import (
    IdleState, CastingState, LureDriftState, StillnessState,
    MicroTwitchState, BiteCheckState, HookOpportunityState, HookedState,
    ReelingState, SlackEventState, CaughtState, LostState,
)


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)

def check(cond: bool, label: str, detail: str = ""):
    if cond:
        ok(label)
    else:
        fail(label, detail)
        raise AssertionError(f"{label}: {detail}" if detail else label)


def _ctx(**kw) -> SimpleContext:
    kw.setdefault("rng", random.Random(1234))
    return SimpleContext(**kw)

def _to(state: FishingState, reason: LostReason | None = None) -> TransitionTo:
    return TransitionTo(state, reason)

def _close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=0.0, abs_tol=1e-9)


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 1:  TRANSITION RESULTS
# ═══════════════════════════════════════════════════════════════════════

def test_transition_results():
    print("\n=== 1: Pending vs TransitionTo ===")
    check(Pending() is PENDING, "1a: Pending is a singleton")
    check(not PENDING, "1b: PENDING is falsy")
    check(bool(_to(FishingState.IDLE)), "1c: a transition to Idle is truthy")
    check(_to(FishingState.IDLE) != PENDING,
          "1d: transition to Idle is never confused with pending")
    check(_to(FishingState.LOST, LostReason.EARLY_HOOK)
          == TransitionTo(FishingState.LOST, LostReason.EARLY_HOOK),
          "1e: transitions compare by value")
    check(str(FishingState.HOOK_OPPORTUNITY) == "HookOpportunity",
          "1f: labels print in CamelCase",
          str(FishingState.HOOK_OPPORTUNITY))


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 2:  IDLE / CASTING / LURE DRIFT
# ═══════════════════════════════════════════════════════════════════════

def test_idle_latch():
    print("\n=== 2: Idle ===")
    ctx = _ctx()
    s = IdleState()
    s.enter(ctx)
    s.update(ctx, 0.016)
    check(s.get_next_state(ctx) is PENDING, "2a: no input → pending")

    ctx.cast_input_pressed = True
    s.update(ctx, 0.016)
    check(s.get_next_state(ctx) == _to(FishingState.CASTING),
          "2b: cast edge → Casting")

    ctx.cast_input_pressed = False
    s.update(ctx, 0.016)
    check(s.get_next_state(ctx) == _to(FishingState.CASTING),
          "2c: latch survives the edge clearing")

    s.exit(ctx)
    s.enter(ctx)
    check(s.get_next_state(ctx) is PENDING, "2d: re-entry resets the latch")


def test_casting():
    print("\n=== 3: Casting ===")
    ctx = _ctx(lure_position=(1.0, 2.0))
    # distance roll 0.5 → 2 + 0.5·6 = 5;  angle roll 0.25 → 90°
    ctx.queue_rolls(0.5, 0.25)
    s = CastingState()
    s.enter(ctx)
    lx, ly = s.landing_position
    check(_close(lx, 1.0) and _close(ly, 7.0),
          "3a: landing = lure + 5·(cos 90°, sin 90°)", f"got {(lx, ly)}")

    for _ in range(3):
        s.update(ctx, 0.125)
    check(s.get_next_state(ctx) is PENDING, "3b: 0.375 s of 0.5 s → pending")
    s.update(ctx, 0.125)
    check(s.cast_progress == 1.0 and s.cast_complete,
          "3c: progress reads exactly 1.0 at the duration")
    check(s.get_next_state(ctx) == _to(FishingState.LURE_DRIFT),
          "3d: cast complete → LureDrift")
    check(s.get_next_state(ctx) == _to(FishingState.LURE_DRIFT),
          "3e: decision is stable")

    s.exit(ctx)
    check(s.landing_position == (lx, ly),
          "3f: landing position still readable after exit")

    bad = CastingState(cast_duration=0.0, min_cast_distance=5.0,
                       max_cast_distance=1.0)
    check(bad.cast_duration == 0.1 and bad.max_cast_distance == 5.0,
          "3g: construction clamps duration and distance range")


def test_lure_drift():
    print("\n=== 4: LureDrift ===")
    ctx = _ctx(lure_velocity=(1.0, 0.0))
    s = LureDriftState()
    s.enter(ctx)
    s.update(ctx, 1.0)
    check(s.get_next_state(ctx) is PENDING, "4a: lure still moving → pending")

    ctx.lure_velocity = (0.05, 0.0)
    s.update(ctx, 0.016)
    check(s.get_next_state(ctx) == _to(FishingState.STILLNESS),
          "4b: |v| under the threshold → Stillness")

    ctx.lure_velocity = (0.0, 0.0)
    s.enter(ctx)
    s.update(ctx, 0.25)
    check(s.get_next_state(ctx) is PENDING,
          "4c: minimum drift time not yet reached")
    s.update(ctx, 0.25)
    check(s.get_next_state(ctx) == _to(FishingState.STILLNESS),
          "4d: settles once minimum drift time passes")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 3:  STILLNESS / MICRO-TWITCH
# ═══════════════════════════════════════════════════════════════════════

def test_stillness():
    print("\n=== 5: Stillness ===")
    ctx = _ctx()
    s = StillnessState()
    s.enter(ctx)
    for _ in range(5):
        s.update(ctx, 0.5)
        check(s.get_next_state(ctx) is PENDING, "5a: pending below 3 s")
    s.update(ctx, 0.5)
    check(s.stillness_progress == 1.0 and s.threshold_reached,
          "5b: progress 1.0 at 3 s")
    check(s.get_next_state(ctx) == _to(FishingState.BITE_CHECK),
          "5c: threshold alone → BiteCheck")

    s = StillnessState(stillness_threshold=1.0)
    s.enter(ctx)
    ctx.cast_input_pressed = True
    s.update(ctx, 1.0)
    check(s.threshold_reached and s.micro_twitch_requested,
          "5d: both conditions true in one frame")
    check(s.get_next_state(ctx) == _to(FishingState.MICRO_TWITCH),
          "5e: micro-twitch wins over the threshold")

    s.enter(ctx)
    s.update(ctx, 0.1)
    check(s.get_next_state(ctx) == _to(FishingState.MICRO_TWITCH),
          "5f: twitch request alone → MicroTwitch")
    check(StillnessState(0.0).stillness_threshold == 0.1,
          "5g: threshold floored at 0.1 s")


def test_micro_twitch():
    print("\n=== 6: MicroTwitch ===")
    ctx = _ctx()
    s = MicroTwitchState()
    s.enter(ctx)
    s.update(ctx, 0.1)
    check(s.get_next_state(ctx) is PENDING, "6a: half-way → pending")
    s.update(ctx, 0.1)
    check(s.twitch_complete and s.twitch_progress == 1.0,
          "6b: complete at 0.2 s")
    check(s.get_next_state(ctx) == _to(FishingState.STILLNESS),
          "6c: back to Stillness")
    check(MicroTwitchState(0.0).twitch_duration == 0.05,
          "6d: duration floored at 0.05 s")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 4:  BITE CHECK
# ═══════════════════════════════════════════════════════════════════════

def test_bite_check():
    print("\n=== 7: BiteCheck ===")

    # 7a–c: certain bite
    ctx = _ctx()
    ctx.queue_rolls(0.999999)
    s = BiteCheckState(base_bite_probability=1.0)
    s.enter(ctx)
    s.update(ctx, 0.25)
    check(s.get_next_state(ctx) is PENDING and ctx.pending_rolls() == 1,
          "7a: no roll before check duration")
    s.update(ctx, 0.25)
    check(s.final_bite_probability == 1.0, "7b: base 1.0, modifier 0 → 1.0")
    check(s.get_next_state(ctx) == _to(FishingState.HOOK_OPPORTUNITY),
          "7c: any draw in [0,1) bites")

    # 7d: no bite → back to Stillness; get_next_state never draws
    ctx = _ctx()
    ctx.queue_rolls(0.9, 0.1)
    s = BiteCheckState()
    s.enter(ctx)
    s.update(ctx, 0.5)
    first = s.get_next_state(ctx)
    second = s.get_next_state(ctx)
    check(first == second == _to(FishingState.STILLNESS)
          and ctx.pending_rolls() == 0,
          "7d: miss + return roll 0.1 < 0.6 → Stillness, stable")

    # 7e: no bite → Idle
    ctx = _ctx()
    ctx.queue_rolls(0.9, 0.7)
    s.enter(ctx)
    s.update(ctx, 0.5)
    check(s.get_next_state(ctx) == _to(FishingState.IDLE) and not s.bite_occurred,
          "7e: miss + return roll 0.7 → Idle")

    # 7f: modifier is additive
    ctx = _ctx(bite_probability_modifier=1.0)
    ctx.queue_rolls(0.5)
    s.enter(ctx)
    s.update(ctx, 0.5)
    check(_close(s.final_bite_probability, 0.6) and s.bite_occurred,
          "7f: 0.3 × (1 + 1) = 0.6, roll 0.5 bites",
          f"p={s.final_bite_probability}")

    ctx = _ctx(bite_probability_modifier=5.0)
    ctx.queue_rolls(0.5)
    s.enter(ctx)
    s.update(ctx, 0.5)
    check(s.final_bite_probability == 1.0, "7g: final probability clamped to 1")

    # 7h: roll happens exactly once
    ctx = _ctx()
    ctx.queue_rolls(0.9, 0.1, 0.0, 0.0)
    s.enter(ctx)
    s.update(ctx, 0.5)
    s.update(ctx, 0.5)
    check(ctx.pending_rolls() == 2, "7h: second update does not re-roll")

    # 7i: timeout first
    ctx = _ctx()
    ctx.queue_rolls(0.0)
    s.enter(ctx)
    s.update(ctx, 6.0)
    check(s.timed_out and ctx.pending_rolls() == 1,
          "7i: timeout elapses before the check runs")
    check(s.get_next_state(ctx) == _to(FishingState.IDLE),
          "7j: timeout → Idle")

    s = BiteCheckState(base_bite_probability=1.5, check_duration=2.0,
                       timeout_duration=1.0)
    check(s.base_bite_probability == 1.0 and s.timeout_duration == 2.0,
          "7k: probability clamped, timeout ≥ check duration")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 5:  HOOK OPPORTUNITY / HOOKED
# ═══════════════════════════════════════════════════════════════════════

def test_hook_opportunity():
    print("\n=== 8: HookOpportunity ===")
    ctx = _ctx(cast_input_pressed=True)
    s = HookOpportunityState()
    s.enter(ctx)
    s.update(ctx, 0.05)
    check(s.hook_input_received and s.early_input_penalty,
          "8a: input at 0.05 s is penalised")
    check(s.get_next_state(ctx) == _to(FishingState.LOST, LostReason.EARLY_HOOK),
          "8b: early hook → Lost(EarlyHook)")

    ctx = _ctx()
    s.enter(ctx)
    s.update(ctx, 0.25)
    ctx.cast_input_pressed = True
    s.update(ctx, 0.25)
    check(s.hook_input_received and not s.early_input_penalty,
          "8c: input at 0.5 s is clean")
    check(s.get_next_state(ctx) == _to(FishingState.HOOKED),
          "8d: clean hook → Hooked")

    s.update(ctx, 1.0)
    check(s.elapsed_time == 0.5, "8e: resolved window stops counting")

    ctx = _ctx()
    s.enter(ctx)
    s.update(ctx, 0.4)
    check(s.get_next_state(ctx) is PENDING, "8f: waiting inside the window")
    s.update(ctx, 0.4)
    check(s.window_expired and s.window_progress == 1.0,
          "8g: window expires at 0.8 s")
    check(s.get_next_state(ctx) == _to(FishingState.LOST, LostReason.MISSED_HOOK),
          "8h: expiry → Lost(MissedHook)")

    check(HookOpportunityState(1.0, 0.9).early_input_penalty_window == 0.5,
          "8i: early window capped at half the window")


def test_hooked():
    print("\n=== 9: Hooked ===")
    ctx = _ctx()
    s = HookedState()
    s.enter(ctx)
    s.update(ctx, 0.1)
    s.update(ctx, 0.1)
    check(s.get_next_state(ctx) is PENDING, "9a: pending before 0.3 s")
    s.update(ctx, 0.1)
    check(s.hook_set_complete and s.hook_set_progress == 1.0,
          "9b: hook set after 0.3 s")
    check(s.get_next_state(ctx) == _to(FishingState.REELING), "9c: → Reeling")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 6:  REELING
# ═══════════════════════════════════════════════════════════════════════

def test_reeling_snap_before_catch():
    print("\n=== 10: Reeling — held reel snaps the line ===")
    ctx = _ctx(reel_input_held=True, fish_struggle_intensity=0.0)
    s = ReelingState()
    s.enter(ctx)
    check(_close(s.current_tension, 0.3), "10a: starts at 30 % tension")

    frames = 0
    for frames in range(1, 30):
        s.update(ctx, 0.05)
        if s.line_snapped:
            break
    check(s.line_snapped and frames in (28, 29),
          "10b: snaps after ~1.4 s of held reel", f"frames={frames}")
    check(not s.fish_caught and s.reel_progress < 1.0,
          "10c: snap comes long before the catch",
          f"progress={s.reel_progress:.3f}")
    check(s.get_next_state(ctx)
          == _to(FishingState.LOST, LostReason.LINE_SNAPPED),
          "10d: → Lost(LineSnapped)")

    tension = s.current_tension
    s.update(ctx, 1.0)
    check(s.current_tension == tension, "10e: resolved fight stops simulating")


def test_reeling_catch():
    print("\n=== 11: Reeling — steady reel lands the fish ===")
    ctx = _ctx(reel_input_held=True)
    ctx.queue_rolls(0.0)
    s = ReelingState(tension_increase_rate=0.1, progress_per_second=0.5)
    s.enter(ctx)
    for _ in range(15):
        s.update(ctx, 0.125)
    check(s.get_next_state(ctx) is PENDING, "11a: pending before 2 s")
    s.update(ctx, 0.125)
    check(s.reel_progress == 1.0 and s.fish_caught,
          "11b: progress exactly 1.0 after 2 s")
    check(s.get_next_state(ctx) == _to(FishingState.CAUGHT), "11c: → Caught")
    check(ctx.pending_rolls() == 1, "11d: no draws while reeling steadily")


def test_reeling_struggle_and_escape():
    print("\n=== 12: Reeling — struggle and escape ===")
    ctx = _ctx(reel_input_held=True, fish_struggle_intensity=1.0)
    s = ReelingState()
    s.enter(ctx)
    s.update(ctx, 0.1)
    check(_close(s.current_tension, 0.375),
          "12a: struggle adds half the reel rate again",
          f"tension={s.current_tension}")

    ctx = _ctx()
    ctx.queue_rolls(0.7, 0.5)
    s.enter(ctx)
    s.update(ctx, 0.9)          # tension 0.03, chance 0.7·0.9 = 0.63
    check(not s.fish_escaped, "12b: roll 0.7 beats a 0.63 escape chance")
    s.update(ctx, 0.01)         # brief dip: chance ≈ 0.0073
    check(not s.fish_escaped, "12c: a short dip rarely loses the fish")

    ctx = _ctx()
    ctx.queue_rolls(0.5)
    s.enter(ctx)
    s.update(ctx, 1.0)          # tension 0 → chance 1.0·1.0
    check(s.fish_escaped and s.current_tension == 0.0,
          "12d: slack line for a full second → escape")
    check(s.get_next_state(ctx)
          == _to(FishingState.LOST, LostReason.FISH_ESCAPED),
          "12e: → Lost(FishEscaped)")


def _reeling_in_slack(ctx: SimpleContext) -> ReelingState:
    s = ReelingState(tension_increase_rate=0.1, progress_per_second=0.01,
                     slack_event_chance=1.0)
    ctx.reel_input_held = True
    ctx.queue_rolls(0.5)
    s.enter(ctx)
    for _ in range(4):
        s.update(ctx, 0.5)
    return s


def test_reeling_slack():
    print("\n=== 13: Reeling — embedded slack ===")
    ctx = _ctx()
    s = _reeling_in_slack(ctx)
    check(s.slack_event_triggered and _close(s.current_tension, 0.5),
          "13a: slack roll at the 2 s check", f"tension={s.current_tension}")

    ctx.reel_input_held = False
    s.update(ctx, 0.1)
    s.update(ctx, 0.1)
    check(s.slack_event_triggered and _close(s.slack_release_time, 0.2),
          "13b: release counting toward 0.3 s")
    ctx.reel_input_held = True
    s.update(ctx, 0.1)
    check(s.slack_release_time == 0.0 and _close(s.current_tension, 0.52),
          "13c: holding resets the counter and doubles the rise")
    ctx.reel_input_held = False
    s.update(ctx, 0.3)
    check(not s.slack_event_triggered and _close(s.current_tension, 0.42),
          "13d: cleared with a 10 % rebate", f"tension={s.current_tension}")
    check(s.get_next_state(ctx) is PENDING, "13e: fight continues")

    ctx = _ctx()
    s = _reeling_in_slack(ctx)
    s.update(ctx, 3.0)
    check(s.line_snapped and s.current_tension == s.max_tension,
          "13f: reeling through slack snaps the line")
    check(s.get_next_state(ctx)
          == _to(FishingState.LOST, LostReason.SLACK_EVENT_FAILURE),
          "13g: → Lost(SlackEventFailure)")


def test_reeling_clamps():
    print("\n=== 14: Reeling — configuration clamps ===")
    s = ReelingState(tension_increase_rate=0.0, tension_decrease_rate=-1.0,
                     max_tension=0.0, progress_per_second=0.0,
                     slack_event_chance=2.0, slack_event_check_interval=0.0,
                     fish_escape_threshold=5.0)
    check(s.tension_increase_rate == 0.1 and s.tension_decrease_rate == 0.1,
          "14a: rates floored at 0.1")
    check(s.max_tension == 0.1 and s.progress_per_second == 0.01,
          "14b: ceiling and progress floored")
    check(s.slack_event_chance == 1.0 and s.slack_event_check_interval == 0.5,
          "14c: chance clamped, interval floored at 0.5")
    check(_close(s.fish_escape_threshold, 0.05),
          "14d: escape threshold capped at half the ceiling")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 7:  STANDALONE SLACK EVENT
# ═══════════════════════════════════════════════════════════════════════

def test_slack_event():
    print("\n=== 15: SlackEvent ===")
    ctx = _ctx()
    s = SlackEventState()
    s.enter(ctx)
    s.update(ctx, 0.3)
    check(s.slack_cleared and s.release_progress == 1.0,
          "15a: 0.3 s of release clears")
    check(s.get_next_state(ctx) == _to(FishingState.REELING), "15b: → Reeling")

    s.enter(ctx)
    s.update(ctx, 0.29)
    check(_close(s.release_time, 0.29) and not s.slack_cleared
          and 0.96 < s.release_progress < 1.0,
          "15c: 0.29 s is not enough")
    ctx.reel_input_held = True
    s.update(ctx, 0.01)
    check(s.release_time == 0.0 and s.get_next_state(ctx) is PENDING,
          "15d: re-holding resets the release counter")

    s.enter(ctx)
    s.update(ctx, 1.5)
    check(s.line_snapped, "15e: still holding at 1.5 s snaps")
    check(s.get_next_state(ctx)
          == _to(FishingState.LOST, LostReason.SLACK_EVENT_FAILURE),
          "15f: → Lost(SlackEventFailure)")

    bad = SlackEventState(0.1, 0.0)
    check(bad.max_slack_duration == 0.5 and bad.required_release_duration == 0.1,
          "15g: durations floored")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 8:  RESULT STATES
# ═══════════════════════════════════════════════════════════════════════

def test_lost_state():
    print("\n=== 16: Lost ===")
    ctx = _ctx()
    s = LostState()
    s.set_reason(LostReason.LINE_SNAPPED)
    s.enter(ctx)
    check(s.event_ready and s.reason is LostReason.LINE_SNAPPED,
          "16a: event ready with reason on entry")
    s.update(ctx, 0.5)
    s.update(ctx, 0.5)
    check(s.event_ready, "16b: flag survives updates until cleared")
    s.clear_event_ready()
    check(not s.event_ready, "16c: explicit clear")
    s.update(ctx, 0.5)
    check(s.display_progress == 1.0
          and s.get_next_state(ctx) == _to(FishingState.IDLE),
          "16d: → Idle after 1.5 s")
    s.exit(ctx)
    check(s.reason is LostReason.UNKNOWN, "16e: exit resets the reason")

    s.enter(ctx)
    s.exit(ctx)
    check(not s.event_ready, "16f: exit clears an unhandled flag")


def test_caught_state():
    print("\n=== 17: Caught ===")
    ctx = _ctx()
    s = CaughtState()
    s.enter(ctx)
    check(s.event_ready, "17a: event ready on entry")
    for _ in range(3):
        s.update(ctx, 0.5)
        check(s.get_next_state(ctx) is PENDING and s.event_ready,
              "17b: still displaying, flag untouched")
    s.update(ctx, 0.5)
    check(s.get_next_state(ctx) == _to(FishingState.IDLE), "17c: → Idle at 2 s")
    s.exit(ctx)
    check(not s.event_ready, "17d: exit clears the flag")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 9:  60 FPS TIMERS
# ═══════════════════════════════════════════════════════════════════════

FRAME = 1.0 / 60.0

def _frames(state, ctx, n: int):
    for _ in range(n):
        state.update(ctx, FRAME)


def test_frame_rate_timers():
    print("\n=== 18: Timers finish on the frame their duration is reached ===")
    thirty = 0.0
    for _ in range(30):
        thirty += FRAME
    check(thirty < 0.5, "18a: 30 frames of 1/60 fall short of 0.5 in floats")
    check(reached(thirty, 0.5) and progress(thirty, 0.5) == 1.0,
          "18b: reached() and progress() absorb the drift")
    check(not reached(0.49, 0.5) and progress(0.25, 0.5) == 0.5,
          "18c: a real shortfall is still a shortfall")

    ctx = _ctx()
    cast = CastingState()
    cast.enter(ctx)
    _frames(cast, ctx, 29)
    check(cast.get_next_state(ctx) is PENDING, "18d: Casting pending at frame 29")
    _frames(cast, ctx, 1)
    check(cast.cast_complete and cast.cast_progress == 1.0,
          "18e: Casting completes at frame 30", f"{cast.cast_progress!r}")

    still = StillnessState()
    still.enter(ctx)
    _frames(still, ctx, 179)
    check(still.get_next_state(ctx) is PENDING, "18f: Stillness pending at frame 179")
    _frames(still, ctx, 1)
    check(still.threshold_reached and still.stillness_progress == 1.0,
          "18g: Stillness reaches 3 s at frame 180")

    twitch = MicroTwitchState()
    twitch.enter(ctx)
    _frames(twitch, ctx, 12)
    check(twitch.twitch_complete, "18h: MicroTwitch done at frame 12")

    hooked = HookedState()
    hooked.enter(ctx)
    _frames(hooked, ctx, 18)
    check(hooked.hook_set_complete, "18i: Hooked done at frame 18")

    window = HookOpportunityState()
    window.enter(ctx)
    _frames(window, ctx, 48)
    check(window.window_expired and window.window_progress == 1.0,
          "18j: hook window expires at frame 48")

    lost = LostState()
    lost.enter(ctx)
    _frames(lost, ctx, 89)
    check(lost.get_next_state(ctx) is PENDING, "18k: Lost pending at frame 89")
    _frames(lost, ctx, 1)
    check(lost.display_complete and lost.display_progress == 1.0
          and lost.get_next_state(ctx) == _to(FishingState.IDLE),
          "18l: Lost → Idle at frame 90")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Transition results", test_transition_results),
        ("Idle", test_idle_latch),
        ("Casting", test_casting),
        ("LureDrift", test_lure_drift),
        ("Stillness", test_stillness),
        ("MicroTwitch", test_micro_twitch),
        ("BiteCheck", test_bite_check),
        ("HookOpportunity", test_hook_opportunity),
        ("Hooked", test_hooked),
        ("Reeling snap", test_reeling_snap_before_catch),
        ("Reeling catch", test_reeling_catch),
        ("Reeling escape", test_reeling_struggle_and_escape),
        ("Reeling slack", test_reeling_slack),
        ("Reeling clamps", test_reeling_clamps),
        ("SlackEvent", test_slack_event),
        ("Lost", test_lost_state),
        ("Caught", test_caught_state),
        ("60 FPS timers", test_frame_rate_timers),
    ]

    for name, fn in sections:
        try:
            fn()
        except Exception:
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()
            _failed += 1

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Fishing State Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
