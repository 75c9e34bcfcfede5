"""WhatsApp Risale-i Nur reading bot."""
