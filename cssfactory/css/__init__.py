"""
References:
    - [basics](https://developer.mozilla.org/en-US/docs/Learn/CSS/First_steps/How_CSS_is_structured)
    - [nesting](https://developer.chrome.com/articles/css-nesting/)
    - [custom properites](https://developer.mozilla.org/en-US/docs/Web/CSS/Using_CSS_custom_properties)
    - [selectors](https://developer.mozilla.org/en-US/docs/Web/CSS/CSS_Selectors)

<ruleset>
    <selector/> <block>
        <property/>: <value/>;
    </block>
</ruleset>

selector => root, element, class, id, pseudo, children, sibling, etc...,
combinator => `+`, `>`, `.`, ` `, `#`, `::`, `:`, `~`,
"""
from cssfactory.css.tokens import Combinator

__all__ = ["Combinator"]
