"""Environment variables CI providers use to expose the current branch."""

from __future__ import annotations

# Checked in order; GitHub's head ref is only set for pull requests and
# names the source branch, so it beats the merge ref name.
BRANCH_ENV_VARS: tuple[str, ...] = (
    "GITHUB_HEAD_REF",
    "GITHUB_REF_NAME",
    "CI_COMMIT_REF_NAME",
    "CIRCLE_BRANCH",
    "BUILD_SOURCEBRANCHNAME",
    "BITBUCKET_BRANCH",
    "TRAVIS_BRANCH",
    "CODEBUILD_WEBHOOK_HEAD_REF",
)

GIT_BRANCH_REF_PREFIX: str = "refs/heads/"
