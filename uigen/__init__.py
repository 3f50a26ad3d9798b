# UI Gen: streams generated React components for a chat conversation.
