"""
Prompt construction for multi-file and single-file analysis
"""

import json
from typing import Any, Dict, List, Optional, Sequence

from ..analysis.summary import describe_connection
from ..core.models import ParsedDataset, RelationshipEvidence
from .responses import ConversationMessage

SAMPLE_ROWS = 5
PROMPT_SAMPLE_ROWS = 3


def build_file_context(datasets: Sequence[ParsedDataset]) -> List[Dict[str, Any]]:
    """
    Summarize each dataset for the system prompt

    Args:
        datasets: Datasets in prompt order

    Returns:
        One dictionary per dataset with id, name, type, size, rows, columns,
        sheets, upload_time and sample_data (first rows of the primary sheet)
    """
    context = []
    for dataset in datasets:
        sheet = dataset.primary_sheet
        sample = [list(row) for row in sheet.rows[:SAMPLE_ROWS]] if sheet else []
        context.append({
            'id': dataset.identifier,
            'name': dataset.display_name,
            'type': dataset.file_type,
            'size': dataset.file_size,
            'rows': dataset.total_row_count,
            'columns': dataset.total_column_count,
            'sheets': len(dataset.sheets),
            'upload_time': dataset.upload_time.isoformat() if dataset.upload_time else None,
            'sample_data': sample
        })
    return context


def _format_file_entry(info: Dict[str, Any]) -> str:
    sample = json.dumps(info['sample_data'][:PROMPT_SAMPLE_ROWS], default=str, ensure_ascii=False)
    return (
        f"- **{info['name']}** ({(info['type'] or 'unknown').upper()})\n"
        f"  - Size: {info['size'] / 1024 / 1024:.2f} MB\n"
        f"  - Data: {info['rows']} rows × {info['columns']} columns\n"
        f"  - Sheets: {info['sheets']}\n"
        f"  - Sample: {sample}"
    )


def build_system_prompt(
    datasets: Sequence[ParsedDataset],
    connections: Sequence[RelationshipEvidence],
    conversation_history: Sequence[ConversationMessage] = ()
) -> str:
    """
    System prompt listing the current files, their connections and the conversation so far

    Args:
        datasets: Datasets in prompt order
        connections: Evidence from the connection finder
        conversation_history: Earlier turns, oldest first

    Returns:
        Prompt text
    """
    files_block = '\n'.join(_format_file_entry(info) for info in build_file_context(datasets))
    connections_block = '\n'.join(
        f"- {conn.dataset_a} ↔ {conn.dataset_b}: {describe_connection(conn)}"
        for conn in connections
    )
    history_block = '\n'.join(f"{msg.role}: {msg.content}" for msg in conversation_history)

    return f"""You are an advanced AI assistant with access to multiple uploaded files and extensive general knowledge. You can:

1. **Analyze individual files** - Deep dive into specific files
2. **Cross-file analysis** - Find patterns and connections between files
3. **General knowledge integration** - Use your training data to provide context, insights, and answer questions about topics outside the uploaded files
4. **Conversation memory** - Remember previous questions and build on them
5. **File recommendations** - Suggest which files to focus on for specific questions

**IMPORTANT**: You can answer questions about ANY topic, not just the uploaded files. Use your general knowledge to provide comprehensive answers while also referencing uploaded file data when relevant.

**PRIORITY SYSTEM:**
- **HIGHEST**: Direct answers to user questions using your general knowledge
- **HIGH**: Data from uploaded files when directly relevant to the question
- **MEDIUM**: Connections and patterns between uploaded files
- **LOW**: General knowledge for additional context

**CURRENT FILES:**
{files_block}

**FILE CONNECTIONS:**
{connections_block}

**CONVERSATION HISTORY:**
{history_block}

Always:
1. Answer the user's question directly using your general knowledge
2. Reference uploaded file data when it's relevant to the question
3. Explain connections between files when applicable
4. Provide actionable insights and suggestions
5. Be conversational, helpful, and comprehensive"""


def build_user_prompt(query: str) -> str:
    """User prompt wrapping the query for multi-file analysis"""
    return f"""User Query: "{query}"

Please provide a comprehensive answer to this question. You can:
1. Use your general knowledge to answer the question directly
2. Reference uploaded file data if it's relevant to the question
3. Consider any connections between files if applicable
4. Build on previous conversation context
5. Provide additional insights and suggestions"""


def build_file_analysis_prompts(query: str, file_content: str,
                                file_name: Optional[str] = None) -> List[Dict[str, str]]:
    """
    Messages for single-file analysis

    Args:
        query: User question
        file_content: Dataset rendered as text
        file_name: Display name of the file

    Returns:
        Chat messages (system, user)
    """
    system_prompt = f"""You are an expert Excel data analyst and AI agent. You can analyze Excel files, answer questions about the data, perform calculations, identify patterns, and provide insights.

When analyzing Excel data, always:
1. Provide clear, actionable insights
2. Include specific data references when possible
3. Suggest follow-up questions or analyses
4. Be precise with numbers and calculations
5. Explain your reasoning clearly

File: {file_name or 'Unknown'}"""

    user_prompt = f"""Please analyze this Excel file data and answer the following question: "{query}"

Excel File Content:
{file_content}

Please provide a comprehensive analysis that includes:
1. Direct answer to the question
2. Relevant data points and calculations
3. Key insights and patterns
4. Any recommendations or follow-up suggestions"""

    return [
        {'role': 'system', 'content': system_prompt},
        {'role': 'user', 'content': user_prompt}
    ]


def build_validation_prompts(dataset: ParsedDataset) -> List[Dict[str, str]]:
    """
    Messages asking the model for a JSON data-validation report

    Args:
        dataset: Dataset to assess

    Returns:
        Chat messages (system, user)
    """
    system_prompt = """You are an expert data analyst. Analyze the provided file data and return a JSON response with the following structure:
{
  "fileType": "string (file extension in uppercase)",
  "dataRows": "number (total number of data rows)",
  "qualityScore": "number (0-100, data quality assessment)",
  "missingValues": "number (0-100, percentage of missing values)",
  "schemaGenerated": "boolean (whether schema generation was successful)"
}

Analyze the data structure, content quality, completeness, and provide accurate metrics. Reply with the JSON object only."""

    sheet = dataset.primary_sheet
    preview = [list(row) for row in sheet.rows[:SAMPLE_ROWS]] if sheet else []

    user_prompt = f"""Please analyze this file data for data validation:

File Name: {dataset.display_name}
File Size: {dataset.file_size} bytes
Total Rows: {dataset.total_row_count}
Total Columns: {dataset.total_column_count}
Sheets: {len(dataset.sheets)}

File Content Preview:
{json.dumps(preview, indent=2, default=str, ensure_ascii=False)}

Please provide a comprehensive data validation analysis."""

    return [
        {'role': 'system', 'content': system_prompt},
        {'role': 'user', 'content': user_prompt}
    ]
