from .bedrock import create_client, build_prompt, build_payload, invoke_model, extract_text, generate_reply_text, load_prompt_template

__all__ = ['create_client', 'build_prompt', 'build_payload', 'invoke_model', 'extract_text', 'generate_reply_text', 'load_prompt_template']
