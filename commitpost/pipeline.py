"""Pipeline that turns a commit range into a published post."""

import logging
from dataclasses import dataclass

from commitpost.config import Settings
from commitpost.git.base import CommitSource
from commitpost.git.commit_range import CommitRange, collect_commit_range
from commitpost.git.summary import build_commit_summaries
from commitpost.llm.base import BaseLLMProvider
from commitpost.prompt import PromptContext, compose_prompt
from commitpost.publish.base import BasePublisher

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Values reported at the end of a run."""

    generated_post: str
    post_id: str
    post_url: str
    community_id: str
    commit_count: int = 0
    from_id: str = ""
    to_id: str = ""

    @property
    def skipped(self) -> bool:
        return self.commit_count == 0


def build_prompt_context(
    settings: Settings,
    commit_range: CommitRange,
    summaries: list[str],
) -> PromptContext:
    """Combine settings with collected summaries into composer input."""
    return PromptContext(
        from_id=commit_range.from_id,
        to_id=commit_range.to_id,
        commit_summaries=summaries,
        community=settings.community or None,
        tone=settings.tone or None,
        hashtags=list(settings.hashtags),
        call_to_action=settings.call_to_action or None,
        extra_instructions=settings.extra_instructions or None,
        prompt_override=settings.prompt_override or None,
    )


class PostPipeline:
    """Collect commits, compose the prompt, generate and publish the post.

    Every step runs in sequence and any exception aborts the run. A post that
    was already published is not rolled back.
    """

    def __init__(
        self,
        settings: Settings,
        commit_source: CommitSource,
        provider: BaseLLMProvider,
        publisher: BasePublisher,
    ):
        self.settings = settings
        self.commit_source = commit_source
        self.provider = provider
        self.publisher = publisher

    def collect(self) -> CommitRange:
        return collect_commit_range(
            self.commit_source,
            self.settings.from_ref,
            self.settings.to_ref,
            include_from=self.settings.include_start_commit,
        )

    def build_prompt(self, commit_range: CommitRange) -> str:
        """Summarize the commits of a range and compose the model prompt."""
        summaries = build_commit_summaries(
            self.commit_source,
            commit_range.commit_ids,
            self.settings.max_diff_chars,
            self.settings.paths,
        )
        context = build_prompt_context(self.settings, commit_range, summaries)
        return compose_prompt(context)

    def run(self) -> PipelineResult:
        """Execute the pipeline.

        Returns:
            The generated post and publish details. When the range holds no
            commits, every output is empty and nothing is generated or posted.
        """
        community = self.settings.community
        commit_range = self.collect()

        if commit_range.is_empty:
            logger.warning(
                "No commits found between %s and %s. Skipping X post.",
                commit_range.from_id,
                commit_range.to_id,
            )
            return PipelineResult(
                generated_post="",
                post_id="",
                post_url="",
                community_id=community,
                commit_count=0,
                from_id=commit_range.from_id,
                to_id=commit_range.to_id,
            )

        prompt = self.build_prompt(commit_range)

        # The 280-character limit is only requested in the prompt; the model
        # output is published as returned.
        generated_post = self.provider.complete(self.settings.system_prompt, prompt)

        post_id = self.publisher.publish(generated_post, community or None)
        post_url = self.publisher.post_url(post_id) if post_id else ""

        logger.info("Post published successfully.")
        return PipelineResult(
            generated_post=generated_post,
            post_id=post_id,
            post_url=post_url,
            community_id=community,
            commit_count=len(commit_range),
            from_id=commit_range.from_id,
            to_id=commit_range.to_id,
        )
