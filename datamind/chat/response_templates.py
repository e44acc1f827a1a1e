"""
Answer templates for the query interpreter.

Key terms are wrapped in ``**`` emphasis markers like insight messages.
"""

SUMMARY_ANSWER = (
    "This dataset contains **{row_count} records** with **{column_count} columns**. "
    "We detected **{numeric_count} numeric features**. "
    "See the column profiles for detailed statistics."
)

COLUMNS_ANSWER = "The available columns in the **{dataset_name}** dataset are: {columns}."

MAX_ANSWER = "The maximum value found in **{column}** is **{value}**."

MIN_ANSWER = "The minimum value found in **{column}** is **{value}**."

EXTREME_NEEDS_COLUMN = (
    "Please specify a **numeric column** name to find the maximum or minimum value."
)

MEAN_ANSWER = "The average (mean) value of **{column}** is **{value}**."

MEAN_NEEDS_COLUMN = "Please specify a **numeric column** name to calculate the average."

FINDINGS_HEADER = "Here are the key findings I detected:\n\n"

FINDING_LINE = "* **{agent}**: {message}"

NO_FINDINGS_ANSWER = (
    "I did not detect any strong correlations or anomalies. The data appears stable."
)

HELP_ANSWER = (
    "I am the **Conversational Agent**. I can analyze your data using natural language! "
    'Try asking: "summarize the data", "what are the columns?", '
    'or "find the average of [column]".'
)

# Used when the dataset has no display name
DEFAULT_DATASET_NAME = "active"
