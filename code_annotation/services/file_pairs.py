"""File Pair Handlers: list and count the file pairs of an experiment."""

from starlette.requests import Request

from code_annotation.core.domain_types import ExperimentId
from code_annotation.core.errors import RepositoryError, internal
from code_annotation.core.repository_protocols import (
    ExperimentRepository, FilePairRepository, IdentityResolver,
)
from code_annotation.schemas.envelope import Response
from code_annotation.schemas.serializers import (
    new_count_response, new_list_file_pairs_response,
)
from code_annotation.services.experiments import get_experiment_or_404
from code_annotation.services.request_params import url_param_int


class FilePairHandlers:

    def __init__(
        self,
        experiments: ExperimentRepository,
        file_pairs: FilePairRepository,
        identity: IdentityResolver,
    ):
        self.experiments = experiments
        self.file_pairs = file_pairs
        self.identity = identity

    async def get_file_pairs(self, request: Request) -> Response:
        """Paths of every file pair in the experiment, ordered by id."""
        self.identity.get_user_id(request)
        experiment_id = ExperimentId(url_param_int(request, "experiment_id"))

        await get_experiment_or_404(self.experiments, experiment_id)
        try:
            file_pairs = await self.file_pairs.get_all_by_experiment(experiment_id)
        except RepositoryError as e:
            raise internal(f"error getting file pairs from the DB: {e}") from e

        return new_list_file_pairs_response(file_pairs)

    async def count_file_pairs(self, request: Request) -> Response:
        self.identity.get_user_id(request)
        experiment_id = ExperimentId(url_param_int(request, "experiment_id"))

        await get_experiment_or_404(self.experiments, experiment_id)
        try:
            count = await self.file_pairs.count_by_experiment(experiment_id)
        except RepositoryError as e:
            raise internal(f"error counting file pairs from the DB: {e}") from e

        return new_count_response(count)
