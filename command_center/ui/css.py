"""Custom CSS styling for the study dashboard"""

custom_css = """
.gradio-container { max-width: 960px !important; margin: 0 auto !important; }

#study-header h2 { margin-bottom: 4px !important; }
#study-header p { color: #6b7280 !important; font-size: 14px !important; }

/* Today's focus card */
#study-focus {
    background: #eff6ff !important;
    border-left: 4px solid #2563eb !important;
    border-radius: 10px !important;
    padding: 16px 20px !important;
}
#study-focus h4 {
    color: #1d4ed8 !important;
    font-size: 12px !important;
    letter-spacing: 0.05em;
    text-transform: uppercase;
}

#study-weeks { font-size: 14px !important; line-height: 1.6 !important; }
#study-weeks h3 { margin-top: 16px !important; }
"""
