from code_critic.core.domain.analysis import AnalysisRequest, ChatHistoryEntry, RelatedFile

CHAT_HISTORY_LIMIT = 5


class CodeCritiquePromptBuilder:
    """Builds the code critique prompt split into system + user messages.

    Both prompts are plain string functions of their input so that the same
    request always produces byte-identical messages.
    """

    # ── System Prompt ──────────────────────────────────────────────

    @staticmethod
    def build_system_prompt() -> str:
        """Compose the full system prompt from role, analysis areas, schema, and rules."""
        sections = [
            _system_role_section(),
            _analysis_areas_section(),
            _output_schema_section(),
            _instructions_section(),
        ]
        return "\n\n".join(sections)

    # ── User Prompt ────────────────────────────────────────────────

    @staticmethod
    def build_user_prompt(request: AnalysisRequest) -> str:
        """Embed the code, the goal, and the optional context of the request."""
        language = request.context.language
        prompt = _code_section(request.code, language)
        prompt += "\n\n" + _goal_section(request)
        if request.context.related_files:
            prompt += "\n\n" + _related_files_section(request.context.related_files, language)
        if request.chat_history:
            prompt += "\n\n" + _chat_history_section(request.chat_history)
        prompt += "\n\n" + _final_instruction_section()
        return prompt


# ── System Prompt Helpers ────────────────────────────────────────────


def _system_role_section() -> str:
    return (
        "You are an expert code critic and analyzer. Your role is to provide comprehensive, "
        "context-aware feedback on code quality, security, and best practices.\n"
        "Be brutally honest and unapologetic."
    )


def _analysis_areas_section() -> str:
    return (
        "ANALYSIS AREAS:\n"
        "1. SECURITY: Identify vulnerabilities, potential attack vectors, and security anti-patterns\n"
        "2. PERFORMANCE: Detect bottlenecks, inefficient algorithms, and optimization opportunities\n"
        "3. MAINTAINABILITY: Assess code structure, complexity, and long-term maintainability\n"
        "4. READABILITY: Evaluate naming conventions, code clarity, and documentation\n"
        "5. BEST PRACTICES: Check adherence to language/framework-specific conventions"
    )


def _output_schema_section() -> str:
    return (
        "RESPONSE FORMAT:\n"
        "You must respond with a valid JSON object matching this exact structure:\n"
        "{\n"
        '  "overall_score": number (1-10),\n'
        '  "critical_issues": [\n'
        "    {\n"
        '      "type": "security|performance|maintainability|readability",\n'
        '      "severity": "critical|high|medium|low",\n'
        '      "line_range": [start_line, end_line],\n'
        '      "description": "Brief description",\n'
        '      "explanation": "Detailed explanation",\n'
        '      "fix_suggestion": "How to fix it"\n'
        "    }\n"
        "  ],\n"
        '  "suggestions": [\n'
        "    {\n"
        '      "type": "security|performance|maintainability|readability",\n'
        '      "description": "Improvement suggestion",\n'
        '      "line_range": [start_line, end_line],\n'
        '      "impact": "Expected impact"\n'
        "    }\n"
        "  ],\n"
        '  "alternatives": [\n'
        "    {\n"
        '      "description": "Alternative approach",\n'
        '      "code_example": "Code example",\n'
        '      "benefits": ["benefit1", "benefit2"],\n'
        '      "trade_offs": ["tradeoff1", "tradeoff2"]\n'
        "    }\n"
        "  ],\n"
        '  "context_alignment": {\n'
        '    "alignment_score": number (1-10),\n'
        '    "goal_analysis": "How well code achieves user\'s goal",\n'
        '    "recommendations": ["rec1", "rec2"]\n'
        "  }\n"
        "}"
    )


def _instructions_section() -> str:
    return (
        "INSTRUCTIONS:\n"
        "- Be constructive and educational in your feedback\n"
        "- Provide specific, actionable suggestions\n"
        "- Consider the user's stated goal and project context\n"
        "- Focus on the most impactful issues first\n"
        "- Line numbers should be 1-indexed\n"
        "- Always return valid JSON"
    )


# ── User Prompt Helpers ──────────────────────────────────────────────


def _fenced(content: str, language: str) -> str:
    return f"```{language}\n{content}\n```"


def _code_section(code: str, language: str) -> str:
    return f"CODE TO ANALYZE:\n{_fenced(code, language)}"


def _goal_section(request: AnalysisRequest) -> str:
    context = request.context
    lines = [f"USER GOAL: {context.user_goal}", f"LANGUAGE: {context.language}"]
    if context.framework:
        lines.append(f"FRAMEWORK: {context.framework}")
    return "\n".join(lines)


def _related_files_section(files: tuple[RelatedFile, ...], language: str) -> str:
    entries = [
        f"{index}. {f.path} ({f.relevance}):\n{_fenced(f.content, language)}"
        for index, f in enumerate(files, start=1)
    ]
    return "RELATED FILES CONTEXT:\n" + "\n".join(entries)


def _chat_history_section(history: tuple[ChatHistoryEntry, ...]) -> str:
    recent = history[-CHAT_HISTORY_LIMIT:]
    entries = [f"{index}. {entry.message}" for index, entry in enumerate(recent, start=1)]
    return "CHAT HISTORY CONTEXT:\n" + "\n".join(entries)


def _final_instruction_section() -> str:
    return (
        "Please analyze this code and provide detailed feedback focusing on security, "
        "performance, maintainability, readability, and best practices."
    )
