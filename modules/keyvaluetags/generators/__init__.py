"""Build-time code generators for the keyvaluetags package"""
