"""Experiment Handlers: read/create/update experiments and compute the caller's progress.

Invariants:
    - Identity is resolved before anything else (except create, which is open)
    - Path id parsed before any lookup; non-int -> 400
    - Missing experiment -> 404 "no experiment found"
    - Repository faults surface as 500 with context, never as zero progress
    - A body fault on update happens BEFORE any mutation: nothing is persisted
    - No logging here; the dispatcher logs rendered failures

Design Decisions:
    - Collaborators injected through the constructor (no module-level state)
    - Progress counts issued sequentially: one AsyncSession, one statement at a time
    - get_experiments issues one count pair per experiment, in listing order
"""

from starlette.requests import Request

from code_annotation.core.domain_types import ExperimentId, Progress, UserId
from code_annotation.core.errors import RepositoryError, internal, not_found
from code_annotation.core.progress import compute_progress
from code_annotation.core.repository_protocols import (
    AssignmentRepository, ExperimentLike, ExperimentRepository, IdentityResolver,
)
from code_annotation.models.experiment import Experiment
from code_annotation.schemas.envelope import Response
from code_annotation.schemas.requests import ExperimentWrite
from code_annotation.schemas.serializers import (
    new_experiment_response, new_experiments_response,
)
from code_annotation.services.request_params import read_json_body, url_param_int

NO_EXPERIMENT_FOUND = "no experiment found"


async def experiment_progress(
    assignments: AssignmentRepository,
    experiment_id: ExperimentId,
    user_id: UserId,
) -> Progress:
    """Percentage of the user's assignments in the experiment that have an answer."""
    try:
        count_all = await assignments.count_user_assignment(experiment_id, user_id)
    except RepositoryError as e:
        raise internal(f"error counting assignments from the DB: {e}") from e

    try:
        count_complete = await assignments.count_complete_user_assignment(
            experiment_id, user_id,
        )
    except RepositoryError as e:
        raise internal(f"error counting complete assignments from the DB: {e}") from e

    return compute_progress(count_all, count_complete)


async def get_experiment_or_404(
    experiments: ExperimentRepository, experiment_id: ExperimentId,
) -> ExperimentLike:
    """Get experiment or raise 404. Shared by every experiment-scoped handler."""
    try:
        experiment = await experiments.get_by_id(experiment_id)
    except RepositoryError as e:
        raise internal(f"error getting experiment from the DB: {e}") from e
    if experiment is None:
        raise not_found(NO_EXPERIMENT_FOUND)
    return experiment


class ExperimentHandlers:
    """Request handlers for the experiment resource."""

    def __init__(
        self,
        experiments: ExperimentRepository,
        assignments: AssignmentRepository,
        identity: IdentityResolver,
    ):
        self.experiments = experiments
        self.assignments = assignments
        self.identity = identity

    async def get_experiment_details(self, request: Request) -> Response:
        """Details of one experiment with the caller's progress."""
        user_id = self.identity.get_user_id(request)
        experiment_id = ExperimentId(url_param_int(request, "experiment_id"))

        experiment = await get_experiment_or_404(self.experiments, experiment_id)
        progress = await experiment_progress(
            self.assignments, ExperimentId(experiment.id), user_id,
        )
        return new_experiment_response(experiment, progress)

    async def get_experiments(self, request: Request) -> Response:
        """Every experiment, in listing order, with the caller's progress."""
        user_id = self.identity.get_user_id(request)

        try:
            experiments = await self.experiments.get_all()
        except RepositoryError as e:
            raise internal(f"error listing experiments from the DB: {e}") from e

        progresses = [
            await experiment_progress(self.assignments, ExperimentId(e.id), user_id)
            for e in experiments
        ]
        return new_experiments_response(experiments, progresses)

    async def create_experiment(self, request: Request) -> Response:
        """Persist a new experiment from {name, description}. Progress is 0."""
        body = await read_json_body(request, ExperimentWrite)

        experiment = Experiment(name=body.name, description=body.description)
        try:
            await self.experiments.create(experiment)
        except RepositoryError as e:
            raise internal(f"error creating experiment in the DB: {e}") from e

        return new_experiment_response(experiment, 0)

    async def update_experiment(self, request: Request) -> Response:
        """Overwrite name and description of an experiment; the id never changes."""
        user_id = self.identity.get_user_id(request)
        experiment_id = ExperimentId(url_param_int(request, "experiment_id"))

        experiment = await get_experiment_or_404(self.experiments, experiment_id)
        body = await read_json_body(request, ExperimentWrite)

        experiment.name = body.name
        experiment.description = body.description
        try:
            await self.experiments.update(experiment)
        except RepositoryError as e:
            raise internal(f"error updating experiment in the DB: {e}") from e

        progress = await experiment_progress(
            self.assignments, ExperimentId(experiment.id), user_id,
        )
        return new_experiment_response(experiment, progress)
