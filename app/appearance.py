# Copyright 2026 UCP Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Default look of the embedded checkout widget.

Inter typography, blue primary button, and the destination and receipt email
inputs hidden because the host form already collects them.
"""

CHECKOUT_APPEARANCE = {
    "rules": {
        "Label": {
            "font": {"family": "Inter, sans-serif", "size": "14px", "weight": "500"},
            "colors": {"text": "#374151"},
        },
        "Input": {
            "borderRadius": "8px",
            "font": {"family": "Inter, sans-serif", "size": "16px", "weight": "400"},
            "colors": {
                "text": "#000000",
                "background": "#FFFFFF",
                "border": "#E0E0E0",
                "boxShadow": "none",
                "placeholder": "#999999",
            },
            "hover": {"colors": {"border": "#0074D9"}},
            "focus": {"colors": {"border": "#0074D9", "boxShadow": "none"}},
        },
        "PrimaryButton": {
            "font": {"family": "Inter, sans-serif"},
            "colors": {"background": "#0D42E4"},
            "hover": {"colors": {"background": "#0A2FA2"}},
            "disabled": {"colors": {"background": "#F1F5F9"}},
        },
        "DestinationInput": {"display": "hidden"},
        "ReceiptEmailInput": {"display": "hidden"},
    },
    "variables": {
        "colors": {"accent": "#0D42E4"},
    },
}
