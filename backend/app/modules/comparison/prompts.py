STRICT_COMPARE_PROMPT = """[INSTRUCCIONES ABSOLUTAS]
Compara estos dos contratos y devuelve SOLAMENTE un JSON con:

1. ¿Son iguales? (SI/NO)
2. Razón breve (max 5 palabras)
3. Lista de diferencias específicas

FORMATO EXACTO REQUERIDO (SOLO JSON):
{{
  "igual": "SI/NO",
  "razon": "texto",
  "diferencias": ["item1", "item2"]
}}

DOCUMENTO A (PLANTILLA):
{doc_a}

DOCUMENTO B (COMPARAR):
{doc_b}

NO INCLUYAS NADA MÁS QUE EL JSON."""


def build_strict_prompt(doc_a: str, doc_b: str) -> str:
    return STRICT_COMPARE_PROMPT.format(doc_a=doc_a, doc_b=doc_b)
