"""Ripple - server-side components with hooks.

Public API exports:
- Component decorator (from ripple.decorators)
- Root and hooks (from ripple.runtime, ripple.hooks)
- Higher-order components (from ripple.hoc)
- Signal observation (from ripple.signals)
- Contacts (from ripple.contacts)
- HTML helpers (from ripple.html)
"""

# Decorators
from ripple.decorators import component, is_component

# Runtime and hooks
from ripple.runtime import Ref, Root
from ripple.hooks import use_effect, use_handler, use_ref, use_state

# Behavior
from ripple.hoc import increment, with_counter
from ripple.signals import (
    Dimensions,
    SignalObserver,
    SignalSource,
    WindowSource,
    use_logger,
    use_window_size,
)
from ripple.contacts import Contact, ContactForm, insert_contact, is_sorted

# HTML rendering helpers
from ripple.html import Safe, escape_html, render_attr, render_style, safe, spread_attrs

# Errors
from ripple.errors import (
    FormFieldError,
    HookError,
    HookOrderError,
    InvalidStepError,
    ListenerError,
    ObserverStateError,
    RenderLoopError,
    RippleError,
    UnknownHandlerError,
)

# Primary alias used by components
escape = escape_html

__all__ = [
    # Components
    'component',
    'is_component',
    'Root',
    'Ref',
    # Hooks
    'use_state',
    'use_effect',
    'use_ref',
    'use_handler',
    'use_window_size',
    'use_logger',
    # Behavior
    'with_counter',
    'increment',
    'Dimensions',
    'SignalSource',
    'SignalObserver',
    'WindowSource',
    'Contact',
    'ContactForm',
    'insert_contact',
    'is_sorted',
    # HTML
    'Safe',
    'safe',
    'escape',
    'escape_html',
    'render_attr',
    'render_style',
    'spread_attrs',
    # Errors
    'RippleError',
    'InvalidStepError',
    'HookError',
    'HookOrderError',
    'RenderLoopError',
    'UnknownHandlerError',
    'ListenerError',
    'ObserverStateError',
    'FormFieldError',
]
