from .control.target import TargetController
from .control.tracker import IKTracker, StepOutcome, TrackerConfig, TrackerState, TrackingReport
from .model.chain import Chain, Joint
from .model.kinematics import (
    cumulative_angles,
    finite_difference_jacobian,
    joint_positions,
    planar_jacobian,
    tip_position,
)
from .solvers.pinv_solver import PseudoInverseSolver, SingularJacobianError, SolveResult, pseudo_inverse

__all__ = [
    "Chain",
    "Joint",
    "cumulative_angles",
    "finite_difference_jacobian",
    "joint_positions",
    "planar_jacobian",
    "tip_position",
    "PseudoInverseSolver",
    "SingularJacobianError",
    "SolveResult",
    "pseudo_inverse",
    "TargetController",
    "IKTracker",
    "StepOutcome",
    "TrackerConfig",
    "TrackerState",
    "TrackingReport",
]
