"""Rewrite code blocks as Octopress/Hexo codeblock shortcodes"""

import textwrap

from octopub.core.models import CodeBlock


def reformat_code_block(block: CodeBlock) -> str:
    """Return the block as a {% codeblock %} shortcode; the value is not escaped.

    Without a language the lang: segment is left out.
    """
    value = textwrap.dedent(block.value)
    opener = f"{{% codeblock lang:{block.language} %}}" if block.language else "{% codeblock %}"
    return f"{opener}\n{value}{{% endcodeblock %}}"
