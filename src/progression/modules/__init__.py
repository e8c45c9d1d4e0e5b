"""📦 modules/: Bounded contexts específicos del negocio

📚 Contextos actuales:
   • entities/ → Entidades validadas (nivel monótono) y sus variantes

Cada módulo contiene sus propias capas Clean Architecture:
   • domain/         → Entidades, value objects y puertos
   • application/    → Casos de uso
   • infrastructure/ → Adaptadores concretos (memoria, JSON, observabilidad)
   • entry_points/   → CLI
"""
