FACT_CHECK_PROMPT = """Carefully analyze this claim and determine if it is true, false, or partially true. Provide evidence and citations:
  
  "{claim}"
  
  Format your response to clearly state the verdict and explain the reasoning."""

REPORT_INSTRUCTIONS = """Please compile a comprehensive fact-checking report with the following structure:

1. Executive Summary:
   - Brief overview of all claims checked
   - Overall assessment summary

2. Detailed Analysis (for each claim):
   - Claim statement
   - Verdict (true/false/partially true)
   - Reasoning for the verdict
   - Supporting citations
   

Format the report in clear, professional language using Markdown for better readability."""
