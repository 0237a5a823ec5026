"""systems package – Physics, projectiles, combat dispatch, match state, HUD, stats, simulation."""

from .combat_system import CombatDispatcher, CombatResult
from .physics import PhysicsEngine
from .projectile_system import ProjectileSystem
from .match_stats import MatchStats
from .match import Match, MatchState
from .hud import Hud, FighterPanel
from .simulation_runner import SimulationRunner, MatchResult
