from workflow_builder.domain.models import Step, StepKind, Workflow

# ==============================================================================
# SAMPLE WORKFLOWS
# ==============================================================================

# --- Tidy up and condense an article ---
article_processor = Workflow(
    name="Article Processor",
    description="Clean up a pasted article and condense it into a short summary.",
    steps=(
        Step(StepKind.CLEAN_TEXT),
        Step(StepKind.SUMMARIZE),
    ),
)

# --- Turn raw meeting notes into an action list ---
meeting_notes = Workflow(
    name="Meeting Notes Digest",
    description="Fix typos in raw notes, then list the key points.",
    steps=(
        Step(StepKind.CLEAN_TEXT),
        Step(StepKind.EXTRACT_KEY_POINTS),
    ),
)

# --- Full pipeline: all four step kinds ---
content_triage = Workflow(
    name="Content Triage",
    description="Clean, summarize, extract key points and categorize incoming content.",
    steps=(
        Step(StepKind.CLEAN_TEXT),
        Step(StepKind.SUMMARIZE),
        Step(StepKind.EXTRACT_KEY_POINTS),
        Step(StepKind.TAG_CATEGORY),
    ),
)

SAMPLE_WORKFLOWS = {
    wf.name: wf
    for wf in (article_processor, meeting_notes, content_triage)
}
