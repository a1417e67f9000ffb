"""Assignment Handlers: the caller's assignments, saved answers and per-pair tallies.

Invariants:
    - Callers only ever see or modify their own assignments
    - An assignment outside the path's experiment, or owned by someone else -> 404
    - save_assignment validates the body before touching the row
    - save_assignment answers with the empty envelope (nothing further to send)
"""

from starlette.requests import Request

from code_annotation.core.annotation_summary import summarize_answers
from code_annotation.core.domain_types import (
    AssignmentId, ExperimentId, FilePairId,
)
from code_annotation.core.errors import RepositoryError, internal, not_found
from code_annotation.core.repository_protocols import (
    AssignmentRepository, ExperimentRepository, IdentityResolver,
)
from code_annotation.schemas.envelope import Response, new_empty_response
from code_annotation.schemas.requests import AssignmentWrite
from code_annotation.schemas.serializers import (
    new_assignments_response, new_exp_annotations_response,
)
from code_annotation.services.experiments import get_experiment_or_404
from code_annotation.services.request_params import read_json_body, url_param_int

NO_ASSIGNMENT_FOUND = "no assignment found"


class AssignmentHandlers:
    """Request handlers for assignments within an experiment."""

    def __init__(
        self,
        experiments: ExperimentRepository,
        assignments: AssignmentRepository,
        identity: IdentityResolver,
    ):
        self.experiments = experiments
        self.assignments = assignments
        self.identity = identity

    async def get_assignments_for_user_experiment(self, request: Request) -> Response:
        """The caller's assignments in an experiment, ordered by id."""
        user_id = self.identity.get_user_id(request)
        experiment_id = ExperimentId(url_param_int(request, "experiment_id"))

        await get_experiment_or_404(self.experiments, experiment_id)
        try:
            assignments = await self.assignments.get_for_user_experiment(
                experiment_id, user_id,
            )
        except RepositoryError as e:
            raise internal(f"error getting assignments from the DB: {e}") from e

        return new_assignments_response(assignments)

    async def save_assignment(self, request: Request) -> Response:
        """Record the caller's answer and time spent for one assignment."""
        user_id = self.identity.get_user_id(request)
        experiment_id = url_param_int(request, "experiment_id")
        assignment_id = AssignmentId(url_param_int(request, "assignment_id"))

        try:
            assignment = await self.assignments.get_by_id(assignment_id)
        except RepositoryError as e:
            raise internal(f"error getting assignment from the DB: {e}") from e
        if (
            assignment is None
            or assignment.experiment_id != experiment_id
            or assignment.user_id != user_id
        ):
            raise not_found(NO_ASSIGNMENT_FOUND)

        body = await read_json_body(request, AssignmentWrite)

        assignment.answer = body.answer.value
        assignment.duration = body.duration
        try:
            await self.assignments.update(assignment)
        except RepositoryError as e:
            raise internal(f"error saving assignment in the DB: {e}") from e

        return new_empty_response()

    async def get_file_pair_annotations(self, request: Request) -> Response:
        """Answer tally of one file pair across every assigned user."""
        self.identity.get_user_id(request)
        experiment_id = ExperimentId(url_param_int(request, "experiment_id"))
        pair_id = FilePairId(url_param_int(request, "pair_id"))

        await get_experiment_or_404(self.experiments, experiment_id)
        try:
            answers = await self.assignments.get_answers_for_pair(
                experiment_id, pair_id,
            )
        except RepositoryError as e:
            raise internal(f"error getting annotations from the DB: {e}") from e

        return new_exp_annotations_response(summarize_answers(answers))
