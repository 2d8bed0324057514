"""
Configuration template written by `minam init`
"""

MINIMAL_CONFIG_TEMPLATE = """# minam configuration
# Environment variables are substituted: ${VAR}, $VAR, ${VAR:-default}

version: 1
project: my_project

# Completion service (any OpenAI-compatible endpoint)
llm:
  model: gpt-4o
  api_key: ${OPENAI_API_KEY:-}
  # base_url: https://api.openai.com/v1
  max_tokens: 2000
  temperature: 0.1

# Connection finder
connections:
  common_values:
    max_rows: 4        # data rows sampled after the header
    max_values: 5      # shared values reported per pair
  similar_shape:
    tolerance: 0.2     # max relative row/column difference (exclusive)

output:
  directory: minam_results   # --save and relative --output paths land here
  format: text         # text | json | csv
"""
